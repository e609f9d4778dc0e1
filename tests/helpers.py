"""Session builders shared by the test modules."""
from apps.diagnostics.catalog import QUESTIONS
from apps.diagnostics.scoring import record_answer


def answer_area(session, area_number: int, options: str):
    """Answer the questions of area ``area_number`` in order, e.g. ``"DAAAA"``."""
    for idx, option in enumerate(options, start=1):
        session = record_answer(session, f"{area_number}.{idx}", option)
    return session


def answer_all(session, option: str = "D"):
    for q in QUESTIONS:
        session = record_answer(session, q.id, option)
    return session
