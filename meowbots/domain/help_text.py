"""Canned help texts for the Marten bot."""


def general_help(prefix: str = "meow!") -> str:
    return (
        "**Mrow! Here’s all the commands I can help you with:**\n"
        f"`{prefix}help pretty` - Displays the guide for pretty commands.\n"
        f"`{prefix}pretty \"role name\" <hexcode or \"default\">` - Create or update the original role with a name and color.\n"
        f"`{prefix}pretty \"role name\" <hexcode> <role#>` - Create or update an additional role with the given number.\n"
        f"`{prefix}pretty delete` - Delete the last created or updated role.\n"
        f"`{prefix}obliterate` - Delete all messages and threads in the channel (restricted).\n"
        f"`{prefix}disintigrate <number>` - Delete a number of messages (restricted)."
    )


def pretty_help(prefix: str = "meow!") -> str:
    return (
        "# Help!\n"
        "*Mrow! Here’s all the commands I can help you with:*\n"
        "## Pretty Commands\n"
        f"`{prefix}pretty \"role name\" <hexcode or \"default\"> <number>` - Create or update the original role "
        "with a name and color. Add a number for additional roles.\n"
        f"`{prefix}pretty delete <number>` - Delete one of your roles. Without a number, your highest-numbered role goes.\n"
        "## Utilities\n"
        f"`{prefix}obliterate` - Delete every single message and thread in the current channel (admin only).\n"
        f"`{prefix}disintigrate <number>` - Delete a number of messages (admin only)."
    )
