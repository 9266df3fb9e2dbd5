"""Tests for the Indonesian parse-result summaries."""

from __future__ import annotations

from kantong.intent.describe import UNKNOWN_MESSAGE, describe_parse_result, format_rupiah
from kantong.intent.rules_parser import parse_command
from kantong.intent.schema import PocketAlias


def test_format_rupiah() -> None:
    assert format_rupiah(1_250_000) == "Rp\u00a01.250.000"
    assert format_rupiah(500) == "Rp\u00a0500"
    assert format_rupiah(0) == "Rp\u00a00"


def test_describe_complete_transfer(pockets: list[PocketAlias]) -> None:
    result = parse_command("kirim 250k dari tabungan ke e money buat top up", pockets)
    assert describe_parse_result(result) == (
        "Saya menangkap niat transfer sebesar Rp\u00a0250.000 dari Tabungan ke E-Money. "
        "Catatan: top up. "
        "Jika sudah benar, kamu bisa minta aku untuk menjalankannya."
    )


def test_describe_income_missing_pocket(pockets: list[PocketAlias]) -> None:
    result = parse_command("aku dapat gaji 3jt400 hari ini", pockets)
    assert describe_parse_result(result) == (
        "Saya mengenali niat pemasukan sebesar Rp\u00a03.400.000. "
        "Pocket tujuan belum kamu sebutkan. Beritahu detailnya, ya."
    )


def test_describe_expense_missing_amount(pockets: list[PocketAlias]) -> None:
    result = parse_command("bayar dari keb pokok", pockets)
    assert describe_parse_result(result) == (
        "Saya mengenali niat pengeluaran sebesar nominal belum disebutkan dari Kebutuhan Pokok. "
        "Nominal transaksinya belum ada. Beritahu detailnya, ya."
    )


def test_describe_unknown(pockets: list[PocketAlias]) -> None:
    assert describe_parse_result(parse_command("halo", pockets)) == UNKNOWN_MESSAGE
