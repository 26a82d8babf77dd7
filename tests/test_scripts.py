# tests/test_scripts.py
"""Tests for the operational command-line scripts."""

from sqlalchemy import inspect

from question_bank.core.security import decode_voter_id
from question_bank.db.session import engine as app_engine
from question_bank.scripts import ensure_db, tokens


def test_token_script_prints_decodable_token(capsys) -> None:
    assert tokens.main(["42", "--minutes", "5"]) == 0

    token = capsys.readouterr().out.strip()
    assert decode_voter_id(token) == 42


def test_ensure_db_creates_tables() -> None:
    assert ensure_db.main([]) == 0
    assert {"question", "question_vote", "question_score"} <= set(
        inspect(app_engine).get_table_names()
    )
