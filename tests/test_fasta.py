import gzip

import pytest

from sequence_pwm.fasta import read_fasta


def test_read_fasta_records(tmp_path):
    p = tmp_path / "aln.fa"
    p.write_text(">seq1\nAC\n>seq2\nAD\n")
    assert read_fasta(p) == ["AC", "AD"]


def test_read_fasta_multiline_body(tmp_path):
    p = tmp_path / "aln.fa"
    p.write_text(">seq1 some description\nACD\nEFG\n\n>seq2\nAAA\nAAA")
    assert read_fasta(p) == ["ACDEFG", "AAAAAA"]


def test_read_fasta_crlf_line_endings(tmp_path):
    p = tmp_path / "aln.fa"
    p.write_bytes(b">seq1\r\nAC\r\nDE\r\n>seq2\r\nAAAA\r\n")
    assert read_fasta(p) == ["ACDE", "AAAA"]


def test_read_fasta_empty_file(tmp_path):
    p = tmp_path / "empty.fa"
    p.write_text("")
    assert read_fasta(p) == []


def test_header_without_body_is_dropped(tmp_path):
    # records with no sequence lines are dropped, not returned as ""
    p = tmp_path / "aln.fa"
    p.write_text(">seq1\n")
    assert read_fasta(p) == []

    p.write_text(">seq1\n>seq2\nAC\n>seq3\n")
    assert read_fasta(p) == ["AC"]


def test_content_before_first_header(tmp_path):
    p = tmp_path / "aln.fa"
    p.write_text("XX\n>seq1\nAC\n")
    assert read_fasta(p) == ["XX", "AC"]


def test_read_fasta_gzip(tmp_path):
    p = tmp_path / "aln.fa.gz"
    with gzip.open(p, "wt") as f:
        f.write(">seq1\nAC\n>seq2\nAD\n")
    assert read_fasta(p) == ["AC", "AD"]


def test_read_fasta_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_fasta(tmp_path / "missing.fa")


def test_read_fasta_invalid_utf8(tmp_path):
    p = tmp_path / "aln.fa"
    p.write_bytes(b">s\n\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        read_fasta(p)
