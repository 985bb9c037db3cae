import argparse
import json
import logging
import os
import sys
from stardict.lib.exceptions import StarDictError
from stardict.lib.idx import parse_idx_file
from stardict.lib.info import DictionaryInfo, OffsetFormat


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")


def word_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"word count must not be negative: {count}")
    return count


def load_info(args) -> DictionaryInfo:
    """Builds the DictionaryInfo from --ifo, or from --word-count and --offset-bits."""
    if args.ifo:
        info = DictionaryInfo.from_ifo_file(args.ifo)
        if args.offset_bits:
            info = info.model_copy(update={"idx_offset_format": OffsetFormat(args.offset_bits)})
        return info

    return DictionaryInfo(word_count=args.word_count, idx_offset_format=OffsetFormat(args.offset_bits or 32))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Dump a StarDict .idx file to JSON.")
    parser.add_argument("idx_filepath", help="Path to the .idx file.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--ifo", help="Path to the dictionary's .ifo file.")
    source.add_argument("--word-count", type=word_count, help="Expected number of words, instead of --ifo.")
    parser.add_argument("--offset-bits", type=int, choices=[32, 64], help="Offset width, overrides idxoffsetbits.")
    parser.add_argument("--tolerant", action="store_true", help="Warn instead of failing on a word count mismatch.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    for filepath in (args.idx_filepath, args.ifo):
        if filepath and not os.path.exists(filepath):
            print(f"Error: File not found at {filepath}")
            return 1

    try:
        info = load_info(args)
        index = parse_idx_file(args.idx_filepath, info, tolerate_info_mismatch=args.tolerant)
        print(json.dumps(index.model_dump(), indent=2, ensure_ascii=False))
        return 0
    except StarDictError as e:
        print(f"Error parsing index file: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
