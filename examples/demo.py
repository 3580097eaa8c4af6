# demo.py

import argparse
from datetime import datetime
from prismlog import Level, Logger, LoggerConfig, Rule

# Example rules for our demo logger
EXAMPLE_RULES = {
    r"\bERROR\b": "alert",
    r"\bWARN(ING)?\b": "caution",
    r"\d+ms": "timing",
    r'"[^"]*"': "quoted",
}

def main():
    parser = argparse.ArgumentParser(description='Prismlog demo')
    parser.add_argument('-d', '--directory', default='logs/',
        help='Directory for the plain-text log file')
    parser.add_argument('--no-store',
        action='store_true',
        help='Only print to the terminal')
    parser.add_argument('--unsafe',
        action='store_true',
        help='Raise if the log file cannot be written')

    args = parser.parse_args()

    logger = Logger(LoggerConfig(
        directory=args.directory,
        store=not args.no_store,
        unsafe=args.unsafe
    ))

    # Colors can be palette names, hex, rgb or hsl notations
    logger.colors.create("alert", "red-bright")
    logger.colors.create("caution", "#FFB000")
    logger.colors.create("timing", "rgb(120, 200, 255)")
    logger.colors.create("quoted", "hsl(300, 60%, 70%)")
    logger.colors.create("stamp", "gray-dim")

    for pattern, color in EXAMPLE_RULES.items():
        logger.rules.create(pattern, color)

    stamp = Rule(r".+", "stamp")
    logger.props.create(Level.ALL, lambda: datetime.now().strftime("%H:%M:%S"), stamp)
    logger.props.create(Level.WARN, lambda: "[warn]")
    logger.props.create(Level.ERROR, lambda: "[error]")

    logger.info('Loaded "settings.toml" in 12ms')
    logger.warn("WARNING cache is stale, rebuilt in 340ms")
    logger.error("ERROR could not reach", "db-primary")

if __name__ == "__main__":
    main()
