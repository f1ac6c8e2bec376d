"""Braintrust-powered evaluation for CAD notes generation.

Runs the notes service against a set of material/finish cases with the
configured model provider and scores the output for format, capitalization,
finish options on vague requests and expected specification keywords.

Usage:
    uv run python -m evals.cad_notes.run_braintrust_eval
    uv run python -m evals.cad_notes.run_braintrust_eval --dataset-name cad-notes-cases
"""

import argparse

import braintrust
from braintrust import Eval

from cad_notes.ai.factory import create_model_client
from cad_notes.notes.classifier import is_generic_treatment_request
from cad_notes.notes.service import NotesService
from cad_notes.utils.logger import logger
from evals.cad_notes.scorers import (
    all_caps_scorer,
    expected_keywords_scorer,
    finish_options_scorer,
    note_format_scorer,
)

PROJECT_NAME = "cad-notes"

DEFAULT_CASES = [
    {
        "input": {
            "material": "Aluminum 6061-T6",
            "finish": "Anodize Black, MIL-A-8625 Type II",
        },
        "expected": {"keywords": ["6061-T6", "MIL-A-8625"]},
    },
    {
        "input": {"material": "Stainless Steel 304", "finish": "Passivate"},
        "expected": {"keywords": ["304", "PASSIVATE"]},
    },
    {
        "input": {"material": "Titanium 6Al-4V", "finish": "treatment"},
        "expected": {"keywords": ["6AL-4V"]},
    },
    {
        "input": {"material": "Steel 4140", "finish": "finish options"},
        "expected": {"keywords": ["4140"]},
    },
    {
        "input": {"material": "Brass C360", "finish": "none required"},
        "expected": {"keywords": ["C360"]},
    },
]

_service: NotesService | None = None


def get_service() -> NotesService:
    global _service
    if _service is None:
        _service = NotesService(model_client=create_model_client())
    return _service


async def task(input, hooks):
    """Generate notes for a single case.

    Args:
        input: Dict with material and finish
        hooks: Braintrust hooks

    Returns:
        Dict with the four note lines and whether the finish was vague
    """
    material = input["material"]
    finish = input.get("finish", "")

    notes = await get_service().generate_notes(material, finish)

    return {
        "notes": notes.lines(),
        "generic_treatment": is_generic_treatment_request(finish),
    }


def main():
    """Main entry point for Braintrust eval."""
    parser = argparse.ArgumentParser(
        description="Run Braintrust-powered eval on CAD notes generation"
    )
    parser.add_argument(
        "--dataset-name",
        "-d",
        type=str,
        default=None,
        help="Braintrust dataset to evaluate against (defaults to the built-in cases)",
    )
    parser.add_argument(
        "--experiment-name",
        type=str,
        default=None,
        help="Name for this eval experiment (defaults to auto-generated)",
    )
    parser.add_argument(
        "--max-concurrency",
        "-c",
        type=int,
        default=4,
        help="Maximum number of parallel evaluations to run (default: 4)",
    )

    args = parser.parse_args()

    logger.info("CAD NOTES EVAL")
    logger.info(f"Dataset: {args.dataset_name or 'built-in cases'}")
    logger.info(f"Experiment: {args.experiment_name or 'auto-generated'}")
    logger.info(f"Max Concurrency: {args.max_concurrency}")

    if args.dataset_name:
        dataset = braintrust.init_dataset(project=PROJECT_NAME, name=args.dataset_name)
        data = lambda: dataset  # noqa: E731
    else:
        data = lambda: DEFAULT_CASES  # noqa: E731

    result = Eval(
        PROJECT_NAME,
        data=data,
        task=task,
        scores=[
            note_format_scorer,
            all_caps_scorer,
            finish_options_scorer,
            expected_keywords_scorer,
        ],
        experiment_name=args.experiment_name,
        max_concurrency=args.max_concurrency,
    )

    logger.info("EVAL COMPLETE")
    logger.info(f"Summary: {result.summary}")


if __name__ == "__main__":
    main()
