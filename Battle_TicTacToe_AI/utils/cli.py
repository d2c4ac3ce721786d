"""CLI options for board size, seeding, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle TicTacToe AI (human vs. blocking bot)")
    parser.add_argument("--board-size", type=int, help="Board size (3 to 7); prompted for when omitted")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the bot's randomness (optional)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Suppress the move log")
    return parser.parse_args(argv)
