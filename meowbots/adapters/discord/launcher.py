"""Launcher for the Marten/Weasel Discord bots."""

import asyncio
import sys
from typing import Any, Dict, List, Optional, Tuple

import uvicorn

from meowbots.adapters.discord.marten_bot import MartenBot
from meowbots.adapters.discord.weasel_bot import WeaselBot
from meowbots.adapters.storage.json_store import JsonRoleSlotStore
from meowbots.adapters.web.server import create_app
from meowbots.config import AppConfig, ConfigError, load_config


def _log(msg: str):
    print(msg, file=sys.stderr)


_BOT_REGISTRY: Dict[str, Any] = {}


def _build_bots(
    config: AppConfig,
    store: Optional[JsonRoleSlotStore] = None,
    only: Optional[str] = None,
) -> List[Tuple[Any, str]]:
    """Instantiate every bot that has a token configured."""
    _BOT_REGISTRY.clear()
    bots = []

    if only in (None, "marten"):
        if config.marten.token:
            if store is None:
                store = JsonRoleSlotStore(config.marten.role_cache_path)
            bot = MartenBot.from_config(config.marten, store)
            _BOT_REGISTRY["marten"] = bot
            bots.append((bot, config.marten.token))
        else:
            _log("Skipping MartenBot — marten token not set")

    if only in (None, "weasel"):
        if config.weasel.token:
            bot = WeaselBot.from_config(config.weasel)
            _BOT_REGISTRY["weasel"] = bot
            bots.append((bot, config.weasel.token))
        else:
            _log("Skipping WeaselBot — weasel token not set")

    return bots


async def launch_all_bots(config: AppConfig, only: Optional[str] = None):
    """Launch all configured bots (and the status server) concurrently."""
    store = None
    if only in (None, "marten"):
        store = JsonRoleSlotStore(config.marten.role_cache_path)
    bots = _build_bots(config, store=store, only=only)

    if not bots:
        _log("No bots configured. Set the bot tokens in the config file or environment.")
        return

    _log(f"Launching {len(bots)} bot(s)...")

    async def _run(bot, token):
        try:
            await bot.start(token)
        except Exception as e:
            _log(f"[{bot.bot_name}] crashed: {e}")

    tasks = [_run(bot, token) for bot, token in bots]

    if config.status.enabled and store is not None:
        app = create_app(store, _BOT_REGISTRY)
        server = uvicorn.Server(uvicorn.Config(app, host=config.status.host, port=config.status.port))
        tasks.append(server.serve())
        _log(f"Status server on {config.status.host}:{config.status.port}")

    await asyncio.gather(*tasks)


def _load_or_exit(path: Optional[str] = None) -> AppConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        _log(str(e))
        sys.exit(1)


def main(only: Optional[str] = None):
    config = _load_or_exit()
    asyncio.run(launch_all_bots(config, only=only))


def run_marten():
    main(only="marten")


def run_weasel():
    main(only="weasel")


if __name__ == "__main__":
    main()
