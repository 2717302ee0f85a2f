from __future__ import annotations

import os

import pytest

from logux_reporter.domain.frames import FrameKind, classify_frame, classify_stack, normalise_root
from logux_reporter.domain.layout import PADDING

ROOT = "/srv/app"

STACK = "\n".join(
    [
        "Error: boom",
        "    at run (/srv/app/index.js:1:1)",
        "    at check (/srv/app/node_modules/logux-server/base.js:2:2)",
        "    at process._tickCallback (internal/process/next_tick.js:3:3)",
        "no frame here",
    ]
)


def test_normalise_root_appends_separator_once() -> None:
    assert normalise_root(ROOT) == ROOT + os.sep
    assert normalise_root(ROOT + os.sep) == ROOT + os.sep


@pytest.mark.parametrize("root", [None, ""])
def test_normalise_root_treats_empty_as_unset(root: str | None) -> None:
    assert normalise_root(root) is None


def test_classify_stack_drops_header_and_classifies_every_line() -> None:
    frames = classify_stack(STACK, ROOT)

    assert [frame.kind for frame in frames] == [
        FrameKind.APPLICATION,
        FrameKind.DEPENDENCY,
        FrameKind.EXTERNAL,
        FrameKind.EXTERNAL,
    ]


def test_classify_stack_rebases_paths_under_root() -> None:
    frames = classify_stack(STACK, ROOT)

    assert frames[0].text == PADDING + "at run (index.js:1:1)"
    assert frames[1].text == PADDING + "at check (node_modules/logux-server/base.js:2:2)"


def test_external_frames_keep_their_text_with_normalised_indent() -> None:
    frames = classify_stack(STACK, ROOT)

    assert frames[2].text == PADDING + "at process._tickCallback (internal/process/next_tick.js:3:3)"
    assert frames[3].text == PADDING + "no frame here"


def test_sibling_directory_sharing_root_prefix_is_external() -> None:
    frame = classify_frame("    at run (/srv/application/index.js:1:1)", normalise_root(ROOT))
    assert frame.kind is FrameKind.EXTERNAL


def test_missing_root_classifies_everything_as_external() -> None:
    frames = classify_stack(STACK, None)
    assert {frame.kind for frame in frames} == {FrameKind.EXTERNAL}


@pytest.mark.parametrize("stack", [None, "", "Error: only a header"])
def test_stack_without_frames_yields_nothing(stack: str | None) -> None:
    assert classify_stack(stack, ROOT) == []


@pytest.mark.parametrize(
    "line, kind, text",
    [
        (
            '  File "/srv/app/pkg/server.py", line 12, in auth',
            FrameKind.APPLICATION,
            PADDING + 'File "pkg/server.py", line 12, in auth',
        ),
        (
            '  File "/srv/app/.venv/lib/python3.12/site-packages/aiohttp/web.py", line 3, in run',
            FrameKind.DEPENDENCY,
            PADDING + 'File ".venv/lib/python3.12/site-packages/aiohttp/web.py", line 3, in run',
        ),
        (
            '  File "/usr/lib/python3.12/asyncio/events.py", line 80, in _run',
            FrameKind.EXTERNAL,
            PADDING + 'File "/usr/lib/python3.12/asyncio/events.py", line 80, in _run',
        ),
    ],
)
def test_python_frames_follow_the_same_classification(line: str, kind: FrameKind, text: str) -> None:
    frame = classify_frame(line, normalise_root(ROOT))
    assert frame.kind is kind
    assert frame.text == text


def test_every_line_falls_into_exactly_one_class() -> None:
    frames = classify_stack(STACK, ROOT)
    assert len(frames) == len(STACK.split("\n")) - 1
    assert all(frame.kind in FrameKind for frame in frames)
