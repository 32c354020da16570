import sys

from pseudonymizer.config.settings import Settings
from pseudonymizer.logging.logger import Log
from pseudonymizer.processor.processor import build_processor


def main() -> None:
    """Entry point: settings -> processor -> anonymize stdin line by line."""
    settings = Settings()
    Log.configure(settings.log_level)

    processor = build_processor(settings)
    lines = sys.stdin.read().splitlines()
    result = processor.anonymize_units(lines)
    sys.stdout.write("\n".join(result.texts))
    if lines:
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
