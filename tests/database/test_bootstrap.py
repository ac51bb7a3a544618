from config import SCHEMA_PATH

from src.payout_engine.payout_engine.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n  \n"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]


def test_comments_are_dropped():
    sql = "-- Saturday's default; keep\nSELECT 1;\nSELECT 2 -- trailing; note\n;"
    assert list(iter_sql_statements(sql)) == ["SELECT 1", "SELECT 2"]


def test_escaped_quotes_stay_inside_string():
    sql = r"INSERT INTO a VALUES ('it\'s;fine');"
    assert list(iter_sql_statements(sql)) == [r"INSERT INTO a VALUES ('it\'s;fine')"]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS workforce_db;\nUSE workforce_db;\nCREATE TABLE t (id INT);\n"
    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_payouts_table_has_nullable_adjustments_and_unique_period_key():
    statements = list(iter_sql_statements(_strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))))
    payouts = next(s for s in statements if "CREATE TABLE IF NOT EXISTS payouts" in s)

    assert "bonus DECIMAL(14, 4) NULL" in payouts
    assert "deductions DECIMAL(14, 4) NULL" in payouts
    assert "UNIQUE KEY uq_payout_worker_job_period (worker_id, job_id, period_start)" in payouts
