"""Plant Nurse storage adapters — durable persistence of the four collections."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from plantnurse.core.errors import StorageWriteError
from plantnurse.core.types import CheckIn, EditRecord, Plant, Room, Snapshot
from plantnurse.models import CheckInRow, EditRecordRow, PlantRow, RoomRow

logger = logging.getLogger("plantnurse.storage")


class Storage:
    """Persistence adapter interface.

    `save` receives the complete staged state after every mutating command
    and must either persist all of it or raise StorageWriteError.
    """

    def load(self) -> Snapshot:
        raise NotImplementedError

    def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError


class InMemoryStorage(Storage):
    """Keeps the last saved snapshot in memory. Used by tests and demos."""

    def __init__(self, snapshot: Snapshot | None = None):
        self._snapshot = snapshot.model_copy(deep=True) if snapshot else Snapshot()
        self.writes = 0

    def load(self) -> Snapshot:
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot.model_copy(deep=True)
        self.writes += 1


class SqlStorage(Storage):
    """SQLAlchemy-backed storage.

    Every save syncs the tables with the snapshot inside one transaction:
    rows that disappeared are deleted, the rest are merged. Plant order is
    written to the `position` column.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    def load(self) -> Snapshot:
        with self._session() as session:
            rooms = [self._room_from_row(r) for r in session.query(RoomRow).all()]
            plants = [
                self._plant_from_row(p)
                for p in session.query(PlantRow).order_by(PlantRow.position.asc()).all()
            ]
            check_ins = [
                self._check_in_from_row(c)
                for c in session.query(CheckInRow).order_by(CheckInRow.date.asc()).all()
            ]
            edit_records = [
                self._edit_from_row(e)
                for e in session.query(EditRecordRow).order_by(EditRecordRow.date.asc()).all()
            ]
        logger.info(
            f"Loaded {len(plants)} plants, {len(rooms)} rooms, "
            f"{len(check_ins)} check-ins, {len(edit_records)} edit records"
        )
        return Snapshot(plants=plants, rooms=rooms, check_ins=check_ins, edit_records=edit_records)

    def save(self, snapshot: Snapshot) -> None:
        try:
            with self._session() as session:
                self._sync(session, RoomRow, [self._room_row(r) for r in snapshot.rooms])
                self._sync(
                    session,
                    PlantRow,
                    [self._plant_row(p, position) for position, p in enumerate(snapshot.plants)],
                )
                self._sync(session, CheckInRow, [self._check_in_row(c) for c in snapshot.check_ins])
                self._sync(session, EditRecordRow, [self._edit_row(e) for e in snapshot.edit_records])
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Durable write failed: {e}")
            raise StorageWriteError("Durable write failed", {"reason": str(e)}) from e

    @staticmethod
    def _sync(session: Session, model, rows: list) -> None:
        keep = [row.id for row in rows]
        session.query(model).filter(model.id.not_in(keep)).delete(synchronize_session=False)
        for row in rows:
            session.merge(row)

    # ── Record ⇄ row conversion ───────────────────────────────────────────────

    @staticmethod
    def _room_row(room: Room) -> RoomRow:
        return RoomRow(**room.model_dump(mode="json"))

    @staticmethod
    def _plant_row(plant: Plant, position: int) -> PlantRow:
        data = plant.model_dump(mode="json")
        data["date_added"] = plant.date_added
        return PlantRow(position=position, **data)

    @staticmethod
    def _check_in_row(check_in: CheckIn) -> CheckInRow:
        data = check_in.model_dump(mode="json")
        data["date"] = check_in.date
        return CheckInRow(**data)

    @staticmethod
    def _edit_row(record: EditRecord) -> EditRecordRow:
        data = record.model_dump(mode="json")
        data["date"] = record.date
        return EditRecordRow(**data)

    @staticmethod
    def _columns(row, exclude: tuple[str, ...] = ()) -> dict:
        return {c.name: getattr(row, c.name) for c in row.__table__.columns if c.name not in exclude}

    def _room_from_row(self, row: RoomRow) -> Room:
        return Room.model_validate(self._columns(row))

    def _plant_from_row(self, row: PlantRow) -> Plant:
        data = self._columns(row, exclude=("position",))
        data["date_added"] = _aware(row.date_added)
        return Plant.model_validate(data)

    def _check_in_from_row(self, row: CheckInRow) -> CheckIn:
        data = self._columns(row)
        data["date"] = _aware(row.date)
        return CheckIn.model_validate(data)

    def _edit_from_row(self, row: EditRecordRow) -> EditRecord:
        data = self._columns(row)
        data["date"] = _aware(row.date)
        return EditRecord.model_validate(data)


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo; everything is stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
