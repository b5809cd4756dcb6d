from __future__ import annotations

import json
from pathlib import Path

import msgpack
import pytest

from strcodec import cli


def test_encode_prints_hex(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["encode", "hi"]) == 0
    assert capsys.readouterr().out == "6869\n"
    assert cli.main(["encode", "€", "-e", "ucs2"]) == 0
    assert capsys.readouterr().out == "ac20\n"


def test_encode_reports_truncation(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["encode", "hello", "-e", "ascii", "-n", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "68656c\n"
    assert "truncated: consumed 3 code units" in captured.err


def test_encode_negative_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["encode", "hello", "-n", "-1"]) == 1
    assert "length must be non-negative" in capsys.readouterr().err


def test_encode_json_wire(capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    assert cli.main(["encode", "hi", "--wire", "json"]) == 0
    report = json.loads(capsysbinary.readouterr().out)
    assert report == {
        "bytes_written": 2,
        "data": "aGk=",
        "encoding": "utf8",
        "units_consumed": 2,
    }


def test_encode_msgpack_wire(capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    assert cli.main(["encode", "a1b2", "-e", "hex", "--wire", "msgpack"]) == 0
    report = msgpack.unpackb(capsysbinary.readouterr().out, raw=False)
    assert report["data"] == b"\xa1\xb2"
    assert report["units_consumed"] == 4


def test_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["decode", "f09f9880"]) == 0
    assert capsys.readouterr().out == "\U0001F600\n"
    assert cli.main(["decode", "eda080", "-e", "utf8"]) == 0
    assert capsys.readouterr().out == "\\ud800\n"


def test_decode_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["decode", "80"]) == 1
    assert "unexpected continuation byte" in capsys.readouterr().err
    assert cli.main(["decode", "zz"]) == 1
    assert "Invalid hex input" in capsys.readouterr().err
    assert cli.main(["decode", "616263", "-e", "ucs2"]) == 1
    assert "odd-length UCS-2 input" in capsys.readouterr().err


def test_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["length", "\U0001F600"]) == 0
    assert capsys.readouterr().out == "4\n"
    assert cli.main(["length", "Zm9v", "-e", "base64"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_unknown_encoding(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["encode", "x", "-e", "bogus"]) == 1
    assert "Unknown encoding: bogus" in capsys.readouterr().err


def test_encodings_listing(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["encodings"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    ucs2 = next(line for line in lines if line.startswith("ucs2"))
    assert "utf-16le" in ucs2


@pytest.mark.parametrize("wire", ["json", "msgpack"])
def test_inspect_reads_encode_report(
    capsysbinary: pytest.CaptureFixture[bytes], tmp_path: Path, wire: str
) -> None:
    assert cli.main(["encode", "héllo", "-n", "3", "--wire", wire]) == 0
    report_path = tmp_path / f"report.{wire}"
    report_path.write_bytes(capsysbinary.readouterr().out)

    assert cli.main(["inspect", str(report_path), "--wire", wire]) == 0
    assert capsysbinary.readouterr().out.decode("utf-8").splitlines() == [
        "encoding: utf8",
        "bytes: 68c3a9",
        "bytes_written: 3",
        "units_consumed: 2",
        "text: hé",
    ]


def test_inspect_errors(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    assert cli.main(["inspect", str(tmp_path / "missing.json")]) == 1
    assert "Cannot read report" in capsys.readouterr().err
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"encoding":"utf8"}')
    assert cli.main(["inspect", str(bad)]) == 1
    assert "report is missing data" in capsys.readouterr().err
