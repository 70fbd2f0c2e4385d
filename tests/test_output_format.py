import io

from protein_bigram.output_format import write_query_header, write_record_count, write_top_k
from protein_bigram.topk import SimilarityResult


def test_report_layout():
    out = io.StringIO()
    write_record_count(out, 3)
    write_query_header(out, "query", 2)
    write_top_k(out, [SimilarityResult(1.0, "sp|A", 0), SimilarityResult(0.25, "sp|B", 2)])
    assert out.getvalue() == (
        "Successfully read 3 proteins.\n\n"
        "Query Protein: <query>\n"
        "Top 2 most similar proteins:\n"
        "1. sp|A (similarity: 1.0000)\n"
        "2. sp|B (similarity: 0.2500)\n\n"
    )


def test_incomplete_marker():
    out = io.StringIO()
    write_record_count(out, 4, complete=False)
    assert "incomplete" in out.getvalue()
