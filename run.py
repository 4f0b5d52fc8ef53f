"""Candy Box launcher

Loads the configuration and sound preference, then plays a demo session in
which a bot opens random boxes until the session is won or over.
"""

import logging
import os
import random
import sys
from pathlib import Path

import pygame
import yaml
from dotenv import load_dotenv

from candybox.audio.sound import SoundBoard
from candybox.core.controller import build_controller
from candybox.core.models import Phase
from candybox.core.state import GridConfigError, Settings
from candybox.ui.hud import HudText
from candybox.ui.menu import MainMenu

# Config path and seed may come from a .env file
load_dotenv()


def load_config() -> dict:
    """Load the YAML configuration file."""
    config_path = Path(os.getenv("CANDYBOX_CONFIG", "config.yaml"))
    if not config_path.exists():
        print(f"Warning: {config_path} not found, using default config")
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        print(f"Warning: Failed to load config ({exc}), using default config")
        return {}


def pick_covered_box(controller, rng: random.Random):
    covered = [cell for cell in controller.cells if cell.covered]
    return rng.choice(covered) if covered else None


def play_demo(controller, settings: Settings, bot_rng: random.Random, next_frame) -> Phase:
    """Tick the session and let the bot open boxes until it is won or over.

    Args:
        next_frame: callable returning the seconds elapsed since the last frame

    Returns:
        The phase the session ended in (WON or OVER)
    """
    next_click = settings.demo_reveal_interval
    while True:
        dt = next_frame()
        controller.tick(dt)

        phase = controller.current_phase()
        # an auto restart may be pending after game over; the demo stops anyway
        if phase in (Phase.WON, Phase.OVER):
            return phase

        if controller.is_active():
            next_click -= dt
            if next_click <= 0:
                next_click = settings.demo_reveal_interval
                cell = pick_covered_box(controller, bot_rng)
                if cell is not None:
                    cell.interact()


def main():
    """Script entry point."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    print("=" * 60)
    print("Candy Box - demo session")
    print("=" * 60)
    print()

    print("Loading configuration...")
    settings = Settings()
    config = load_config()
    if config:
        settings.load_from_dict(config)
    if os.getenv("CANDYBOX_SEED"):
        settings.demo_seed = int(os.environ["CANDYBOX_SEED"])
    seed = settings.demo_seed if settings.demo_seed is not None else random.randint(1, 999_999)
    print(f"[OK] Configuration loaded (seed={seed})")
    print()

    pygame.init()

    sound = SoundBoard.from_settings(settings)
    menu = MainMenu(settings, sound)
    prefs = menu.start()
    print(f"Sound: {'on' if prefs.sound_on else 'off'}")

    hud = HudText()
    try:
        controller = build_controller(
            settings=settings,
            rng=random.Random(seed),
            listeners=[hud, sound],
        )
    except GridConfigError as exc:
        print(f"[!] Invalid configuration: {exc}")
        pygame.quit()
        return 1

    bot_rng = random.Random(seed + 1)
    clock = pygame.time.Clock()

    menu.play(controller)
    try:
        phase = play_demo(controller, settings, bot_rng, lambda: clock.tick(settings.fps) / 1000.0)
        print(f"Session ended: {phase.value}")
    except KeyboardInterrupt:
        print("\nDemo interrupted")
    finally:
        pygame.quit()

    print()
    for line in hud.lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
