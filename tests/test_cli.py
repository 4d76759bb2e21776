# tests/test_cli.py
import pytest
from click.testing import CliRunner
from cli.main import cli

@pytest.fixture
def invoke(test_db_url):
    runner = CliRunner()

    def run(*args):
        return runner.invoke(cli, ["--database-url", test_db_url, *args])

    assert run("init-db").exit_code == 0
    return run

def test_init_db(invoke, test_db_url):
    result = invoke("init-db")
    assert result.exit_code == 0
    assert test_db_url in result.output

def test_commands_do_not_create_tables(test_db_url):
    result = CliRunner().invoke(cli, ["--database-url", test_db_url, "book", "list"])
    assert result.exit_code == 1
    assert "Store error" in result.output

def test_author_lifecycle(invoke):
    result = invoke("author", "add", "A. Lee")
    assert result.exit_code == 0
    assert "Created author 1: A. Lee" in result.output

    assert invoke("author", "rename", "1", "Alex Lee").exit_code == 0

    result = invoke("author", "show", "1")
    assert result.exit_code == 0
    assert "Alex Lee" in result.output

    assert invoke("author", "delete", "1").exit_code == 0
    assert "No authors found" in invoke("author", "list").output

def test_author_add_blank_name(invoke):
    result = invoke("author", "add", " ")
    assert result.exit_code == 1
    assert "validation_error" in result.output

def test_book_lifecycle(invoke):
    invoke("author", "add", "A. Lee")

    result = invoke("book", "add", "--title", "Go Deep", "--isbn", "0000000000001",
                    "--published", "2020-01-01", "--author-id", "1")
    assert result.exit_code == 0
    assert "Go Deep" in result.output
    assert "A. Lee" in result.output

    result = invoke("book", "update", "1", "--title", "Go Deeper", "--isbn", "0000000000001",
                    "--published", "2021-01-01", "--author-name", "Jane Doe")
    assert result.exit_code == 0

    result = invoke("book", "show", "1")
    assert "Go Deeper" in result.output
    assert "Jane Doe" in result.output
    assert "2021-01-01" in result.output

    result = invoke("author", "list")
    assert "A. Lee" in result.output
    assert "Jane Doe" in result.output

    assert invoke("book", "delete", "1").exit_code == 0
    assert "No books found" in invoke("book", "list").output

def test_book_add_unknown_author(invoke):
    result = invoke("book", "add", "--title", "Go Deep", "--isbn", "0000000000001",
                    "--published", "2020-01-01", "--author-id", "7")
    assert result.exit_code == 1
    assert "not_found" in result.output

def test_book_add_duplicate_isbn(invoke):
    invoke("author", "add", "A. Lee")
    args = ["book", "add", "--title", "Go Deep", "--isbn", "0000000000001",
            "--published", "2020-01-01", "--author-id", "1"]
    assert invoke(*args).exit_code == 0

    result = invoke(*args)
    assert result.exit_code == 1
    assert "constraint_violation" in result.output

def test_book_show_not_found(invoke):
    result = invoke("book", "show", "99")
    assert result.exit_code == 1
    assert "Book not found." in result.output
