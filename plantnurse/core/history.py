"""Plant Nurse History Reconstructor — one timeline per plant."""

from plantnurse.core.types import CheckIn, EditRecord, HistoryEntry, Plant


def build_history(
    plant: Plant,
    check_ins: list[CheckIn],
    edit_records: list[EditRecord],
) -> list[HistoryEntry]:
    """Merge creation, check-ins and edits into a feed, newest first.

    Entries dated identically keep the order created → check-ins → edits.
    """
    entries = [HistoryEntry(type="created", date=plant.date_added)]
    entries.extend(HistoryEntry(type="check-in", date=c.date, data=c) for c in check_ins)
    entries.extend(HistoryEntry(type="edit", date=e.date, data=e) for e in edit_records)
    return sorted(entries, key=lambda entry: entry.date, reverse=True)
