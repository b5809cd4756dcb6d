import argparse
import sys

from strcodec import buffer, registry
from strcodec.encodings.aliases import aliases
from strcodec.errors import StrCodecError
from strcodec.units import to_native, unit_length
from strcodec.wire import WIRE_FORMATS, EncodeReport, dump_report, load_report


def _printable(text: str) -> str:
    return to_native(text).encode("utf-8", "backslashreplace").decode("utf-8")


def encodings() -> int:
    grouped: dict[str, list[str]] = {}
    for alias, kind in aliases.items():
        grouped.setdefault(kind.value, []).append(alias)
    for name in sorted(grouped):
        print(f"{name:18} {', '.join(sorted(grouped[name]))}")
    return 0


def encode(
    text: str, encoding: str | None, length: int | None, wire: str | None
) -> int:
    codec = registry.codec_for(encoding)
    size = codec.byte_length(text) if length is None else length
    buf = bytearray(max(size, 0))
    result = buffer.write(buf, text, 0, size, codec.name)
    data = bytes(buf[: result.bytes_written])
    if wire is None:
        print(data.hex())
        if result.units_consumed < unit_length(text):
            print(
                f"truncated: consumed {result.units_consumed} code units",
                file=sys.stderr,
            )
        return 0
    report = EncodeReport.from_result(codec.name, data, result)
    payload = dump_report(report, wire)
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()
    return 0


def decode(hex_bytes: str, encoding: str | None) -> int:
    try:
        data = bytes.fromhex(hex_bytes)
    except ValueError as exc:
        print(f"Invalid hex input: {exc}", file=sys.stderr)
        return 1
    print(_printable(buffer.to_text(data, encoding)))
    return 0


def length(text: str, encoding: str | None) -> int:
    print(registry.byte_length(text, encoding))
    return 0


def inspect(path: str, wire: str) -> int:
    if path == "-":
        payload = sys.stdin.buffer.read()
    else:
        try:
            with open(path, "rb") as handle:
                payload = handle.read()
        except OSError as exc:
            print(f"Cannot read report: {exc}", file=sys.stderr)
            return 1
    report = load_report(payload, wire)
    print(f"encoding: {report.encoding}")
    print(f"bytes: {report.data.hex()}")
    print(f"bytes_written: {report.bytes_written}")
    print(f"units_consumed: {report.units_consumed}")
    print(f"text: {_printable(report.text())}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="strcodec")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("encodings", help="List recognized encoding names")

    encode_parser = subparsers.add_parser("encode", help="Encode text to bytes")
    encode_parser.add_argument("text", help="Text to encode")
    encode_parser.add_argument("--encoding", "-e", help="Encoding name")
    encode_parser.add_argument(
        "--length",
        "-n",
        type=int,
        help="Destination size in bytes (default: exact encoded length).",
    )
    encode_parser.add_argument(
        "--wire",
        choices=WIRE_FORMATS,
        help="Emit a structured report instead of hex.",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes to text")
    decode_parser.add_argument("bytes", help="Input bytes as hex digits")
    decode_parser.add_argument("--encoding", "-e", help="Encoding name")

    length_parser = subparsers.add_parser(
        "length", help="Print the encoded byte length of text"
    )
    length_parser.add_argument("text", help="Text to measure")
    length_parser.add_argument("--encoding", "-e", help="Encoding name")

    inspect_parser = subparsers.add_parser(
        "inspect", help="Read back a report written by 'encode --wire'"
    )
    inspect_parser.add_argument("report", help="Report file, or - for stdin")
    inspect_parser.add_argument(
        "--wire", choices=WIRE_FORMATS, default="json", help="Report format"
    )

    args = parser.parse_args(argv)

    try:
        if args.command == "encodings":
            return encodings()
        if args.command == "encode":
            return encode(args.text, args.encoding, args.length, args.wire)
        if args.command == "decode":
            return decode(args.bytes, args.encoding)
        if args.command == "length":
            return length(args.text, args.encoding)
        if args.command == "inspect":
            return inspect(args.report, args.wire)
    except StrCodecError as exc:
        print(exc, file=sys.stderr)
        return 1

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
