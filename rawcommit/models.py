"""Data models for rebuilding commit messages.

Contains:
- MessageParts: Pydantic model for an edited subject/body pair and the
  terminator used to join them back into a message
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from rawcommit.constants import DEFAULT_REBUILD_TERMINATOR, Terminator


class MessageParts(BaseModel):
    """Subject and body of a commit message, ready to be rendered.

    Rendering joins the parts as subject, terminator, terminator, body. The
    original per-line terminators of a parsed message cannot be recovered once
    the parts are edited, so a single terminator is used for the rebuild.

    Attributes:
        subject: Single-line commit subject.
        body: Free-form body text, kept verbatim.
        terminator: Terminator placed after the subject and the blank
            separator line.
    """

    model_config = ConfigDict(frozen=True)

    subject: str = ""
    body: str = ""
    terminator: Terminator = DEFAULT_REBUILD_TERMINATOR

    @field_validator("subject")
    @classmethod
    def subject_must_be_single_line(cls, v: str) -> str:
        """Ensure subject holds no line terminators."""
        if "\r" in v or "\n" in v:
            raise ValueError("Subject must be a single line")
        return v

    @field_validator("terminator")
    @classmethod
    def terminator_must_end_lines(cls, v: Terminator) -> Terminator:
        """Ensure terminator is an actual line break."""
        if v is Terminator.NONE:
            raise ValueError("Terminator must be LF, CRLF or CR")
        return v

    @model_validator(mode="after")
    def body_must_not_merge_with_separator(self) -> "MessageParts":
        """A CR separator followed by LF would read back as CRLF."""
        if self.terminator is Terminator.CR and self.body.startswith("\n"):
            raise ValueError("Body cannot start with LF when rebuilding with CR")
        return self

    def render(self) -> str:
        """Render the parts into message text.

        Returns:
            The subject alone when the body is empty, otherwise the subject,
            a blank separator line and the body.
        """
        if not self.body:
            return self.subject

        t = self.terminator.value
        return f"{self.subject}{t}{t}{self.body}"
