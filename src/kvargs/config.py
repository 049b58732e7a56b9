# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

HELP_TOKENS = ("help", "--help", "-h")


class ParserSettings(BaseModel):
    """Knobs of the token grammar. The defaults describe the
    ``--name=value`` syntax; instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str = Field("--", min_length=1, description="literal every token starts with")
    assignment: str = Field("=", min_length=1, max_length=1, description="name/value delimiter")
    strip_chars: str = Field(" ", description="characters stripped from both ends of name and value")
    help_tokens: tuple[str, ...] = Field(HELP_TOKENS, description="tokens which trigger the help")
    list_separator: str = Field(",", min_length=1, description="default separator for get_list()")

    @field_validator("help_tokens")
    @classmethod
    def _no_empty_help_token(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(token == "" for token in value):
            raise ValueError("help tokens must not be empty")
        return value


DEFAULT_SETTINGS = ParserSettings()
