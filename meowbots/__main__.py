"""``python -m meowbots [marten|weasel]``"""

import sys

from meowbots.adapters.discord.launcher import main

if __name__ == "__main__":
    main(only=sys.argv[1].lower() if len(sys.argv) > 1 else None)
