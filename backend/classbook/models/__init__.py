from classbook.models.announcement import Announcement, AnnouncementReply  # noqa: F401
from classbook.models.floor import Floor  # noqa: F401
from classbook.models.ledger_entry import LedgerEntry  # noqa: F401
from classbook.models.room import Room, RoomType  # noqa: F401
from classbook.models.student import Student  # noqa: F401
from classbook.models.study_material import StudyMaterial  # noqa: F401
from classbook.models.subject import Subject  # noqa: F401
from classbook.models.teacher import Teacher  # noqa: F401
