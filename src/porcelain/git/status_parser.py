"""Decoder for NUL-delimited ``git status --porcelain -b`` output.

Each record is a two character status code (index, working tree), a blank,
then the path. Renames span two records: the destination followed by the
source. The ``##`` record carries branch and tracking information.

The decoder is permissive: unknown codes and layouts are dropped, missing
values fall back to defaults, and nothing is ever raised.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, List, Tuple

from porcelain.git.models import (
    FileStatusSummary,
    PorcelainFileStatus,
    RenamedFile,
    StatusSummary,
)
from porcelain.utils import NULL, filter_string, filter_type

S = PorcelainFileStatus

_BRANCH_MARKER = "##"
_IGNORED_MARKER = f"{S.IGNORED.value}{S.IGNORED.value}"

# --- Branch header patterns ---

_AHEAD_RE = re.compile(r"ahead (\d+)")
_BEHIND_RE = re.compile(r"behind (\d+)")
_CURRENT_RE = re.compile(r"^(.+?(?=(?:\.{3}|\s|$)))")
_TRACKING_RE = re.compile(r"\.{3}(\S*)")
_ON_EMPTY_BRANCH_RE = re.compile(r"\son\s(\S+?)(?=\.{3}|$)")
_DETACHED_RE = re.compile(r"\(no branch\)")


class _Effect(Enum):
    CREATED = "created"
    DELETED = "deleted"
    MODIFIED = "modified"
    STAGED = "staged"
    RENAMED = "renamed"
    IGNORED = "ignored"
    NOT_ADDED = "not_added"
    CONFLICTED = "conflicted"
    BRANCH = "branch"


Effects = Tuple[_Effect, ...]


def _code(index: PorcelainFileStatus, working_dir: PorcelainFileStatus) -> str:
    return f"{index.value}{working_dir.value}"


def _conflicts(index: PorcelainFileStatus, *working_dir: PorcelainFileStatus) -> Dict[str, Effects]:
    """Every pairing of *index* with the given working tree statuses is a conflict."""
    return {_code(index, wd): (_Effect.CONFLICTED,) for wd in working_dir}


_EFFECTS: Dict[str, Effects] = {
    _code(S.NONE, S.ADDED): (_Effect.CREATED,),
    _code(S.NONE, S.DELETED): (_Effect.DELETED,),
    _code(S.NONE, S.MODIFIED): (_Effect.MODIFIED,),
    _code(S.ADDED, S.NONE): (_Effect.CREATED, _Effect.STAGED),
    _code(S.ADDED, S.MODIFIED): (_Effect.CREATED, _Effect.STAGED, _Effect.MODIFIED),
    _code(S.DELETED, S.NONE): (_Effect.DELETED, _Effect.STAGED),
    _code(S.MODIFIED, S.NONE): (_Effect.MODIFIED, _Effect.STAGED),
    _code(S.MODIFIED, S.MODIFIED): (_Effect.MODIFIED, _Effect.STAGED),
    # the rename effect swaps the payload for its destination path
    _code(S.RENAMED, S.NONE): (_Effect.RENAMED,),
    _code(S.RENAMED, S.MODIFIED): (_Effect.RENAMED, _Effect.MODIFIED),
    _IGNORED_MARKER: (_Effect.IGNORED,),
    _code(S.UNTRACKED, S.UNTRACKED): (_Effect.NOT_ADDED,),
    **_conflicts(S.ADDED, S.ADDED, S.UNMERGED),
    **_conflicts(S.DELETED, S.DELETED, S.UNMERGED),
    **_conflicts(S.UNMERGED, S.ADDED, S.DELETED, S.UNMERGED),
    _BRANCH_MARKER: (_Effect.BRANCH,),
}


def renamed_file(payload: str) -> RenamedFile:
    """Split a ``to NUL from`` rename payload. A missing source means ``from == to``."""
    to_path, _, from_path = payload.partition(NULL)
    return RenamedFile(from_path=from_path or to_path, to_path=to_path)


def parse_branch_header(result: StatusSummary, line: str) -> None:
    """Fill the branch fields of *result* from the ``##`` header *line*."""
    m = _AHEAD_RE.search(line)
    result.ahead = int(m.group(1)) if m else 0

    m = _BEHIND_RE.search(line)
    result.behind = int(m.group(1)) if m else 0

    m = _CURRENT_RE.search(line)
    result.current = filter_type(m.group(1) if m else None, filter_string, None)

    m = _TRACKING_RE.search(line)
    result.tracking = filter_type(m.group(1) if m else None, filter_string, None)

    # "No commits yet on main" and similar name the branch after "on"
    m = _ON_EMPTY_BRANCH_RE.search(line)
    if m:
        result.current = filter_type(m.group(1), filter_string, result.current)

    result.detached = bool(_DETACHED_RE.search(line))


def _apply(result: StatusSummary, effects: Effects, path: str) -> None:
    for effect in effects:
        if effect is _Effect.RENAMED:
            renamed = renamed_file(path)
            result.renamed.append(renamed)
            path = renamed.to_path
        elif effect is _Effect.CREATED:
            result.created.append(path)
        elif effect is _Effect.DELETED:
            result.deleted.append(path)
        elif effect is _Effect.MODIFIED:
            result.modified.append(path)
        elif effect is _Effect.STAGED:
            result.staged.append(path)
        elif effect is _Effect.NOT_ADDED:
            result.not_added.append(path)
        elif effect is _Effect.CONFLICTED:
            result.conflicted.append(path)
        elif effect is _Effect.IGNORED:
            if result.ignored is None:
                result.ignored = []
            result.ignored.append(path)
        elif effect is _Effect.BRANCH:
            parse_branch_header(result, path)


def _file_summary(path: str, index: str, working_dir: str) -> FileStatusSummary:
    if S.RENAMED.value in (index, working_dir):
        renamed = renamed_file(path)
        return FileStatusSummary(
            path=renamed.to_path,
            index=index,
            working_dir=working_dir,
            from_path=renamed.from_path,
        )
    return FileStatusSummary(path=path, index=index, working_dir=working_dir)


def _dispatch(result: StatusSummary, index: str, working_dir: str, path: str) -> None:
    code = f"{index}{working_dir}"
    effects = _EFFECTS.get(code)
    if effects is None:
        return  # unknown code

    _apply(result, effects, path)

    if code not in (_BRANCH_MARKER, _IGNORED_MARKER):
        result.files.append(_file_summary(path, index, working_dir))


def split_line(result: StatusSummary, line: str) -> None:
    """Resolve the status prefix width of one record and dispatch it."""
    trimmed = line.strip()
    blank = S.NONE.value

    if trimmed[2:3] == blank:
        _dispatch(result, trimmed[0], trimmed[1], trimmed[3:])
    elif trimmed[1:2] == blank:
        _dispatch(result, blank, trimmed[0], trimmed[2:])
    # anything else is not a status record


def parse_status_summary(text: str) -> StatusSummary:
    """Decode NUL-delimited porcelain status *text* into a StatusSummary."""
    tokens: List[str] = text.split(NULL)
    result = StatusSummary()

    idx = 0
    total = len(tokens)
    while idx < total:
        line = tokens[idx].strip()
        idx += 1

        if not line:
            continue

        # a rename record carries its source path in the next token
        if line[0] == S.RENAMED.value:
            source = tokens[idx] if idx < total else ""
            line += NULL + source
            idx += 1

        split_line(result, line)

    return result
