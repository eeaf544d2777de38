"""UI-visible state owned by the directory controller."""

from dataclasses import dataclass, field
from enum import StrEnum

from domain.entities.notification import Notification
from domain.entities.profile import Profile


class FormMode(StrEnum):
    """Which profile form, if any, is open."""

    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True, slots=True)
class ActiveForm:
    """Modal region state; ``profile`` is set only in EDIT mode."""

    mode: FormMode = FormMode.CLOSED
    profile: Profile | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED


CLOSED_FORM = ActiveForm()


@dataclass
class DirectoryState:
    """Transient, derived view of the directory.

    ``all_profiles`` and ``filtered_profiles`` are copies; they are replaced
    wholesale on reload and never patched in place.
    """

    all_profiles: list[Profile] = field(default_factory=list)
    filtered_profiles: list[Profile] = field(default_factory=list)
    is_list_loading: bool = False
    is_form_submitting: bool = False
    is_search_loading: bool = False
    search_query: str = ""
    active_form: ActiveForm = CLOSED_FORM
    pending_delete: Profile | None = None
    notifications: list[Notification] = field(default_factory=list)

    @property
    def is_delete_prompt_open(self) -> bool:
        return self.pending_delete is not None
