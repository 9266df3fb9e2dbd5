"""Indonesian summaries of parse results for the assistant chat."""

from __future__ import annotations

from kantong.intent.schema import EntityField, Intent, ParseResult

UNKNOWN_MESSAGE = "Saya belum bisa memahami permintaanmu. Bisa jelaskan lagi?"

MISSING_PROMPTS: dict[EntityField, str] = {
    EntityField.amount: "Nominal transaksinya belum ada.",
    EntityField.pocket: "Pocket tujuan belum kamu sebutkan.",
    EntityField.pocket_from: "Pocket asal perlu disebutkan.",
    EntityField.pocket_to: "Pocket tujuan transfer belum jelas.",
}


def format_rupiah(value: int) -> str:
    """Format an amount the id-ID way: no decimals, a no-break space after "Rp"."""

    return "Rp\u00a0" + f"{value:,}".replace(",", ".")


def describe_parse_result(result: ParseResult) -> str:
    """Describe what was understood and what the user still has to provide."""

    if result.intent == Intent.unknown:
        return UNKNOWN_MESSAGE

    entities = result.entities
    amount_text = (
        format_rupiah(entities.amount)
        if entities.amount is not None
        else "nominal belum disebutkan"
    )

    parts: list[str] = []
    if result.intent == Intent.income_to_pocket:
        pocket_text = f" ke {entities.pocket}" if entities.pocket else ""
        parts.append(f"Saya mengenali niat pemasukan sebesar {amount_text}{pocket_text}.")
    elif result.intent == Intent.expense_from_pocket:
        pocket_text = f" dari {entities.pocket}" if entities.pocket else ""
        parts.append(f"Saya mengenali niat pengeluaran sebesar {amount_text}{pocket_text}.")
    else:
        from_text = f" dari {entities.pocket_from}" if entities.pocket_from else ""
        to_text = f" ke {entities.pocket_to}" if entities.pocket_to else ""
        parts.append(f"Saya menangkap niat transfer sebesar {amount_text}{from_text}{to_text}.")

    if entities.note:
        parts.append(f"Catatan: {entities.note}.")

    if result.missing:
        prompts = " ".join(MISSING_PROMPTS[field] for field in result.missing)
        parts.append(f"{prompts} Beritahu detailnya, ya.")
    else:
        parts.append("Jika sudah benar, kamu bisa minta aku untuk menjalankannya.")

    return " ".join(parts)
