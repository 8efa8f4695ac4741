"""Command-line entry point."""

import argparse
import signal
import sys
from pathlib import Path

from toum_updater import __version__
from toum_updater.core.config_manager import ConfigManager
from toum_updater.core.updater import ModUpdater
from toum_updater.utils.console_log import ConsoleLog
from toum_updater.utils.errors import ConfigError, UnknownArgumentError, UpdaterError
from toum_updater.utils.progress import ProgressBar

EXIT_INTERRUPTED = 130


class UsageError(UpdaterError):
    pass


class UpdaterArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage with exit code 1 instead of 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = UpdaterArgumentParser(
        prog="toum-updater",
        description="Install or update the Town of Us Mira mod from its latest GitHub release.",
        allow_abbrev=False,
    )
    parser.add_argument("-f", "--force", dest="force_update", action="store_true",
                        help="Force update even if mod is up to date")
    parser.add_argument("-n", "--no-backup", dest="skip_backup", action="store_true",
                        help="Skip backing up existing mod")
    parser.add_argument("-b", "--force-backup", dest="force_backup", action="store_true",
                        help="Force backup of existing mod")
    parser.add_argument("-c", "--config", type=Path, metavar="PATH",
                        help="JSON config file (default: ~/.config/toum-updater/config.json)")
    parser.add_argument("--download-dir", type=Path, metavar="PATH",
                        help="Steam library folder holding the game and the mod")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show debug messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise UnknownArgumentError(unknown[0])
    return args


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt()


def main(argv=None) -> int:
    log = ConsoleLog()
    try:
        args = parse_args(argv)
    except UpdaterError as e:
        log(str(e), error=True)
        build_parser().print_usage(sys.stderr)
        return e.exit_code

    try:
        config = ConfigManager(args.config, log_callback=log).build({
            'download_dir': args.download_dir.expanduser() if args.download_dir else None,
            'force_update': args.force_update,
            'skip_backup': args.skip_backup,
            'force_backup': args.force_backup,
            'verbose': args.verbose,
        })
    except ConfigError as e:
        log(str(e), error=True)
        return e.exit_code

    log = ConsoleLog(log_file=config.log_file, verbose=config.verbose)
    progress = ProgressBar(color=log.color)
    previous_handler = signal.signal(signal.SIGTERM, _raise_interrupt)

    try:
        return ModUpdater(config, log, progress=progress).run()
    except KeyboardInterrupt:
        log("Interrupted, partial downloads removed.", error=True)
        return EXIT_INTERRUPTED
    finally:
        signal.signal(signal.SIGTERM, previous_handler)


if __name__ == "__main__":
    sys.exit(main())
