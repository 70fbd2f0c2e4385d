import pytest

import protein_search
from protein_bigram.cli import SearchParams
from protein_bigram.errors import InvalidAlphabetError
from protein_bigram.fasta import FastaRecord, write_fasta


@pytest.fixture
def db_fasta(tmp_path):
    path = tmp_path / "db.fasta"
    write_fasta(
        path,
        [
            FastaRecord("aa1", "AA"),
            FastaRecord("aa2", "AA"),
            FastaRecord("ab", "AB"),
            FastaRecord("kl", "KLKLKL"),
        ],
    )
    return path


def test_search_with_query_sequence(db_fasta, tmp_path, capsys):
    out_path = tmp_path / "out" / "results.txt"
    protein_search.main(
        ["-i", str(db_fasta), "-q", "aa", "-o", str(out_path), "--top-k", "2", "--chunk-size", "3", "--no-progress"]
    )
    text = out_path.read_text(encoding="utf-8")
    assert "Successfully read 4 proteins." in text
    assert "1. aa1 (similarity: 1.0000)" in text
    assert "2. aa2 (similarity: 1.0000)" in text
    assert "ab" not in text.split("Top 2")[1]
    assert "[protein_search] Read 4 proteins." in capsys.readouterr().out


def test_search_with_query_fasta(db_fasta, tmp_path):
    queries = tmp_path / "queries.fasta"
    write_fasta(queries, [FastaRecord("q1", "KLKLKL"), FastaRecord("q2", "AB")])
    out_path = tmp_path / "results.txt"
    protein_search.main(
        ["-i", str(db_fasta), "--query-fasta", str(queries), "-o", str(out_path), "--top-k", "1", "--no-progress"]
    )
    text = out_path.read_text(encoding="utf-8")
    assert "Query Protein: <q1>\nTop 1 most similar proteins:\n1. kl (similarity: 1.0000)" in text
    assert "Query Protein: <q2>\nTop 1 most similar proteins:\n1. ab (similarity: 1.0000)" in text


def test_rejects_non_positive_params(db_fasta):
    with pytest.raises(SystemExit):
        protein_search.parse_args(["-i", str(db_fasta), "-q", "MA", "--top-k", "0"])
    with pytest.raises(ValueError):
        SearchParams(chunk_size=0)


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        protein_search.main(["-i", str(tmp_path / "missing.fasta"), "-q", "MA", "--no-progress"])


def test_invalid_query_sequence(db_fasta, tmp_path):
    with pytest.raises(InvalidAlphabetError):
        protein_search.main(["-i", str(db_fasta), "-q", "MA*", "-o", str(tmp_path / "r.txt"), "--no-progress"])
