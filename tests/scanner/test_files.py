"""Tests for file and directory scanning."""

import pytest

from credscan.core.exceptions import ConfigError
from credscan.scanner import build_scanner, iter_files, scan_file, scan_paths, scan_text
from credscan.scanner.config import ScanConfig

STRIPE = "sk_live_" + "a" * 24
TWILIO = "AC" + "b" * 32


def test_scan_text_line_and_column():
    text = f"first line\n  key = '{STRIPE}'\n{TWILIO}\n"
    findings = scan_text(text, build_scanner(), path="cfg.py")
    assert [(f.secret_type, f.line, f.column) for f in findings] == [
        ("Stripe Access Key", 2, 10),
        ("Twilio API Key", 3, 1),
    ]
    assert findings[0].path == "cfg.py"


def test_scan_paths_walks_directories(tmp_path):
    (tmp_path / "a.env").write_text(f"STRIPE={STRIPE}\n")
    sub = tmp_path / "pkg"
    sub.mkdir()
    (sub / "b.py").write_text(f"sid = '{TWILIO}'\n")
    (tmp_path / "clean.txt").write_text("nothing to see\n")

    findings = scan_paths([tmp_path])
    assert sorted((f.path.replace("\\", "/").split("/")[-1], f.secret_type) for f in findings) == [
        ("a.env", "Stripe Access Key"),
        ("b.py", "Twilio API Key"),
    ]


def test_default_excludes(tmp_path):
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config").write_text(f"url = https://u:{'x' * 8}@host\n")
    nested = tmp_path / "app" / "node_modules" / "lib"
    nested.mkdir(parents=True)
    (nested / "index.js").write_text(STRIPE)
    (tmp_path / "keep.txt").write_text(STRIPE)

    names = [p.name for p in iter_files(tmp_path)]
    assert names == ["keep.txt"]


def test_include_globs(tmp_path):
    (tmp_path / "a.env").write_text(STRIPE)
    (tmp_path / "b.txt").write_text(STRIPE)
    config = ScanConfig(include_globs=["**/*.env"])
    assert [p.name for p in iter_files(tmp_path, config)] == ["a.env"]


def test_binary_and_oversized_files_are_skipped(tmp_path):
    binary = tmp_path / "blob.dat"
    binary.write_bytes(b"\x00\x01" + STRIPE.encode())
    image = tmp_path / "logo.png"
    image.write_bytes(STRIPE.encode())
    big = tmp_path / "big.txt"
    big.write_text(STRIPE + " " * 100)

    scanner = build_scanner()
    assert scan_file(binary, scanner) == []
    assert scan_file(image, scanner) == []
    assert scan_file(big, scanner, max_bytes=50) == []
    assert len(scan_file(big, scanner)) == 1


def test_single_file_root(tmp_path):
    f = tmp_path / "one.txt"
    f.write_text(TWILIO)
    assert len(scan_paths([f])) == 1


def test_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_paths([tmp_path / "nope"])


def test_disabled_detectors_and_allowlist(tmp_path):
    (tmp_path / "x.txt").write_text(f"{STRIPE}\n{TWILIO}\nhttps://u:pw@h\n")
    config = ScanConfig(disabled_detectors=["Twilio API Key"], allowlist=["pw"])
    findings = scan_paths([tmp_path], config)
    assert [f.secret_type for f in findings] == ["Stripe Access Key"]


def test_unknown_disabled_detector():
    with pytest.raises(ConfigError) as exc:
        build_scanner(ScanConfig(disabled_detectors=["Nope"]))
    assert exc.value.section == "disabled_detectors"


def test_file_finding_to_dict_redacts_by_default():
    (f,) = scan_text(STRIPE, build_scanner(), path="k")
    assert f.to_dict() == {
        "path": "k",
        "line": 1,
        "column": 1,
        "secret_type": "Stripe Access Key",
        "value": "sk_liv****aaaa",
        "start": 0,
        "end": 32,
    }
    assert f.to_dict(redact=False)["value"] == STRIPE


def test_invalid_utf8_does_not_join_token_halves(tmp_path):
    f = tmp_path / "split.env"
    f.write_bytes(b"k=sk_live_" + b"a" * 12 + b"\xff" + b"a" * 12 + b"\n")
    assert scan_file(f, build_scanner()) == []


def test_invalid_utf8_keeps_columns(tmp_path):
    f = tmp_path / "shifted.env"
    f.write_bytes(b"\xff\xfe=" + STRIPE.encode() + b"\n")
    (finding,) = scan_file(f, build_scanner())
    assert finding.value == STRIPE
    assert (finding.column, finding.finding.start) == (4, 3)
