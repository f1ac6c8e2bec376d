"""Deterministic scorers for generated CAD notes.

Each scorer takes the eval task output (the four note lines) and returns a
braintrust Score between 0 and 1.

Usage:
    from evals.cad_notes.scorers import note_format_scorer

    Eval(..., scores=[note_format_scorer, all_caps_scorer, finish_options_scorer])
"""

import re

from braintrust import Score

NOTE_LINE_PATTERN = re.compile(r"^([1-4])\. \S")

# Separators a model uses when listing alternatives in the finish note.
OPTION_SEPARATOR_PATTERN = re.compile(r";|\bOR\b|\n|,\s*(?=[A-Z]+\s+PER\b)")


def note_format_scorer(input, output, expected=None, **kwargs) -> Score:
    """Score 1 when there are exactly four lines numbered 1 through 4 in order."""
    lines = output.get("notes", []) if output else []
    well_formed = sum(
        1
        for index, line in enumerate(lines, start=1)
        if (match := NOTE_LINE_PATTERN.match(line)) and int(match.group(1)) == index
    )
    score = well_formed / 4 if len(lines) == 4 else 0.0
    return Score(
        name="note_format",
        score=score,
        metadata={"line_count": len(lines), "well_formed": well_formed},
    )


def all_caps_scorer(input, output, expected=None, **kwargs) -> Score:
    """Score the share of note bodies written without lowercase letters."""
    lines = output.get("notes", []) if output else []
    if not lines:
        return Score(name="all_caps", score=0.0)

    upper = [line for line in lines if line == line.upper()]
    return Score(
        name="all_caps",
        score=len(upper) / len(lines),
        metadata={"lowercase_lines": [line for line in lines if line not in upper]},
    )


def finish_options_scorer(input, output, expected=None, **kwargs) -> Score | None:
    """For vague finish requests, check that note 4 lists more than one option.

    Returns None for cases with a specific finish so they are left out of the
    average.
    """
    if not output or not output.get("generic_treatment"):
        return None

    lines = output.get("notes", [])
    finish_note = lines[3] if len(lines) == 4 else ""
    option_count = len(OPTION_SEPARATOR_PATTERN.split(finish_note))
    return Score(
        name="finish_options",
        score=1.0 if option_count >= 2 else 0.0,
        metadata={"option_count": option_count, "finish_note": finish_note},
    )


def expected_keywords_scorer(input, output, expected=None, **kwargs) -> Score | None:
    """Score the share of expected keywords (e.g. spec numbers) found in the notes."""
    keywords = (expected or {}).get("keywords", [])
    if not keywords:
        return None

    text = "\n".join(output.get("notes", [])) if output else ""
    found = [keyword for keyword in keywords if keyword.upper() in text.upper()]
    return Score(
        name="expected_keywords",
        score=len(found) / len(keywords),
        metadata={"found": found, "missing": [k for k in keywords if k not in found]},
    )
