import argparse
import logging
import time

from utils.config_loader import load_config
from utils.logger import setup_logging

from core.clock import local_now
from core.countdown import CountdownTicker
from core.runtime_state import RuntimeState
from core.terminal import VIEWS, render_screen

CLEAR_SCREEN = "\033[2J\033[H"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Hawler prayer times: API server and terminal display.")
    parser.add_argument("--config", default="config.yml", help="Path to YAML config file.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("serve", help="Run the prayer times HTTP API.")

    display_parser = sub.add_parser("display", help="Show today's times and a live countdown.")
    display_parser.add_argument("--lang", choices=["en", "ku"], help="Display language.")
    display_parser.add_argument("--view", choices=VIEWS, help="Which days to show.")
    return parser.parse_args(argv)


# ========== API SERVER ==========
def serve(config: dict):
    import uvicorn
    from api.app import create_app

    api_config = config["api"]
    host, port = api_config["host"], int(api_config["port"])
    logging.info(f"[CORE] API listening at http://{host}:{port} (docs at /docs)")
    uvicorn.run(create_app(config), host=host, port=port)


# ========== TERMINAL DISPLAY ==========
def display(config: dict, lang: str = None, view: str = None):
    from utils.prayer_api import get_prayer_times

    timezone = config["settings"].get("timezone")
    state = RuntimeState(
        lang=lang or config["settings"]["language"],
        view=view or config["display"]["view"],
    )
    state.schedules = get_prayer_times(config["api"]["base_url"])
    if not state.schedules:
        logging.warning("[CORE] No prayer times available")

    ticker = CountdownTicker(state, now_fn=lambda: local_now(timezone))
    ticker.start()

    refresh = float(config["display"].get("refresh_seconds", 1))
    try:
        while True:
            snapshot = state.snapshot()
            now = snapshot["last_tick"] or local_now(timezone)
            print(CLEAR_SCREEN, end="")
            print(render_screen(snapshot, now, config["ramadan"]), flush=True)
            time.sleep(refresh)
    except KeyboardInterrupt:
        logging.info("[CORE] Shutdown requested")
    finally:
        ticker.stop()


# ========== MAIN ==========
def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config)

    log_config = config["logging"]
    setup_logging(log_config["dir"], log_config["level"], console=args.command == "serve")
    logging.info(f"[CONFIG] Loaded {args.config}")
    logging.info("[CORE] Hawler prayer times started")

    if args.command == "serve":
        serve(config)
    else:
        display(config, lang=args.lang, view=args.view)


if __name__ == "__main__":
    main()
