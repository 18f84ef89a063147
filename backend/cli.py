import json
import argparse
import sys

from pydantic import ValidationError

from application.exceptions import StringMapError
from backend.main import configure_logging, create_string_map
from backend.settings import Settings, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stringmap",
        description="Apply string map operations and print the resulting map as JSON",
    )
    parser.add_argument("--reset", nargs="*", metavar="ITEM",
                        help="Reset the map from these items before anything else")
    parser.add_argument("--add", nargs="*", default=[], metavar="S",
                        help="Strings to add under their reversed form")
    parser.add_argument("--remove-key", nargs="*", default=[], metavar="K",
                        help="Keys to remove")
    parser.add_argument("--remove-value", nargs="*", default=[], metavar="V",
                        help="Values to remove (every entry holding them)")
    parser.add_argument("--uppercase", action="store_true",
                        help="Uppercase all keys after the other mutations")
    parser.add_argument("--contains", nargs="*", metavar="V",
                        help="Report whether all these values are present")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def run(args: argparse.Namespace) -> dict:
    settings = get_settings()
    if args.log_level:
        settings = Settings(_env_file=None, **{**settings.model_dump(), "log_level": args.log_level})
    configure_logging(settings)

    string_map = create_string_map(settings=settings)

    if args.reset is not None:
        string_map.reset_from(args.reset)
    for text in args.add:
        string_map.add_string(text)
    for key in args.remove_key:
        string_map.remove_by_key(key)
    for value in args.remove_value:
        string_map.remove_by_value(value)
    if args.uppercase:
        string_map.uppercase_all_keys()

    report = {
        "size": string_map.size(),
        "entries": [entry.model_dump() for entry in string_map.entries()],
        "values_sorted": string_map.values_sorted(),
        "keys_sorted_descending": string_map.keys_sorted_descending(),
        "first_value": string_map.first_value(),
        "last_value": string_map.last_value(),
        "keys_uppercased": string_map.keys_uppercased(),
        "distinct_value_count": string_map.distinct_value_count(),
        "reversal_violations": [entry.model_dump() for entry in string_map.reversal_violations()],
    }
    if args.contains is not None:
        report["contains_all_values"] = string_map.contains_all_values(args.contains)
    return report


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        report = run(args)
    except (StringMapError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
