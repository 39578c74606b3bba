"""Path data parser — absolute M/L/H/V/Q/C/Z subset of the SVG path grammar.

Converts a path `d` string into a PathShape of typed segments. Parsing is
best-effort: unsupported commands are skipped and commands with missing or
unreadable arguments emit nothing, unless strict mode is requested.
"""

from __future__ import annotations

import logging
import re

from clipmorph.svg.segments import (
    DEFAULT_BEZIER_STEPS,
    CubicBezier,
    Line,
    PathShape,
    Point,
    QuadraticBezier,
    Segment,
)

logger = logging.getLogger(__name__)

# Any letter except e/E starts a command; e/E belong to exponents.
_COMMAND_RE = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")
_SEPARATOR_RE = re.compile(r"[\s,]+")

# Arguments consumed per supported command
_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "Q": 4, "C": 6, "Z": 0}

SUPPORTED_COMMANDS = frozenset(_ARITY)


class PathDataError(ValueError):
    """Raised in strict mode for path data outside the supported subset."""


def tokenize_path_data(d: str) -> list[tuple[str, list[str]]]:
    """Split path data into (command, [raw argument tokens]) pairs."""
    commands: list[tuple[str, list[str]]] = []
    for match in _COMMAND_RE.finditer(d):
        raw = match.group(2).strip()
        tokens = [tok for tok in _SEPARATOR_RE.split(raw) if tok] if raw else []
        commands.append((match.group(1), tokens))
    return commands


def _to_floats(tokens: list[str], count: int) -> list[float] | None:
    if len(tokens) < count:
        return None
    try:
        return [float(tok) for tok in tokens[:count]]
    except ValueError:
        return None


def parse_path_data(
    d: str,
    *,
    bezier_steps: int = DEFAULT_BEZIER_STEPS,
    strict: bool = False,
) -> PathShape:
    """Parse path data into a PathShape.

    Only the first argument group after each command is used. Relative,
    shorthand and arc commands are not supported: they are skipped without
    touching the current point (which can leave later absolute commands
    starting from a stale position), or rejected with PathDataError when
    `strict` is set.
    """
    segments: list[Segment] = []
    skipped: list[str] = []
    current: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)

    for cmd, tokens in tokenize_path_data(d):
        if cmd not in SUPPORTED_COMMANDS:
            if strict:
                raise PathDataError(f"Unsupported path command {cmd!r}")
            skipped.append(cmd)
            continue

        args = _to_floats(tokens, _ARITY[cmd])
        if args is None:
            if strict:
                raise PathDataError(f"Malformed arguments for {cmd!r}: {' '.join(tokens)!r}")
            logger.debug("Dropping %s with unreadable arguments %r", cmd, tokens)
            continue

        if cmd == "M":
            current = (args[0], args[1])
            start = current
        elif cmd == "L":
            nxt = (args[0], args[1])
            segments.append(Line(current, nxt))
            current = nxt
        elif cmd == "H":
            nxt = (args[0], current[1])
            segments.append(Line(current, nxt))
            current = nxt
        elif cmd == "V":
            nxt = (current[0], args[0])
            segments.append(Line(current, nxt))
            current = nxt
        elif cmd == "Q":
            p1 = (args[0], args[1])
            p2 = (args[2], args[3])
            segments.append(QuadraticBezier(current, p1, p2, steps=bezier_steps))
            current = p2
        elif cmd == "C":
            p1 = (args[0], args[1])
            p2 = (args[2], args[3])
            p3 = (args[4], args[5])
            segments.append(CubicBezier(current, p1, p2, p3, steps=bezier_steps))
            current = p3
        else:  # Z
            segments.append(Line(current, start))
            current = start

    if skipped:
        logger.warning(
            "Skipped %d unsupported path command(s): %s",
            len(skipped),
            "".join(sorted(set(skipped))),
        )

    return PathShape(segments=tuple(segments), start_point=start, skipped_commands=tuple(skipped))
