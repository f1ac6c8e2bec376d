"""Prompt templates for notes generation and follow-up questions."""

import textwrap

from cad_notes.notes.classifier import is_generic_treatment_request


def build_generic_treatment_prompt(material: str) -> str:
    """Prompt asking the model to list treatment options for a material."""
    return textwrap.dedent(f"""\
        You are an expert mechanical engineer and materials scientist. The user has provided a material and needs to know possible treatments or finishes.
        First, identify common and appropriate treatments/finishes for the given material.
        Then, generate CAD drawing notes. For the finish note, list the possible options clearly.

        Material: "{material}"

        Generate the notes in the specified JSON format.\
    """).strip()


def build_specific_finish_prompt(material: str, finish: str) -> str:
    """Prompt asking for notes for an exact material and finish."""
    return textwrap.dedent(f"""\
        You are an expert mechanical engineer and CAD drafter. Your task is to generate material and finish notes for a CAD drawing based on the provided inputs.
        The notes must be concise, accurate, and follow standard industry conventions.

        Material: "{material}"
        Finish: "{finish}"

        Generate the notes in the specified JSON format. Ensure the notes are written in ALL CAPS as is standard for CAD drawings.\
    """).strip()


def build_notes_prompt(material: str, finish: str) -> str:
    if is_generic_treatment_request(finish):
        return build_generic_treatment_prompt(material)
    return build_specific_finish_prompt(material, finish)


def build_ask_prompt(material: str, question: str) -> str:
    """Prompt for a free-text question about a material."""
    return textwrap.dedent(f"""\
        You are an expert materials scientist and mechanical engineer. Answer the following question about the material: "{material}".
        Provide a concise and accurate answer. If the question is about specifications or standards, cite the standard numbers (e.g., AMS, ASTM, MIL-SPEC) if possible.

        Question: "{question}"\
    """).strip()
