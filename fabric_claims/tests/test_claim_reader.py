import io

import pytest

from fabric_claims.src.data.claim_reader import iter_lines, load_claims, read_claims
from fabric_claims.src.errors import ClaimInputError, MalformedLineError


def test_reads_every_line():
    stream = io.BytesIO(b"#1 @ 1,3: 4x4\r\n#2 @ 3,1: 4x4\n#3 @ 5,5: 2x2")
    claims = read_claims(stream)
    assert [c.id for c in claims] == [1, 2, 3]
    assert claims[2].position == (5, 5)


def test_empty_input_yields_no_claims():
    assert read_claims(io.BytesIO(b"")) == []


def test_bad_line_fails_whole_batch():
    stream = io.BytesIO(b"#1 @ 1,3: 4x4\n#2 3,1: 4x4\n#3 @ 5,5: 2x2\n")
    with pytest.raises(MalformedLineError):
        read_claims(stream)


def test_blank_line_is_malformed():
    with pytest.raises(MalformedLineError):
        read_claims(io.BytesIO(b"#1 @ 1,3: 4x4\n\n"))


def test_invalid_utf8_is_input_error():
    stream = io.BytesIO(b"#1 @ 1,3: 4x4\n#2 @ \xff,1: 4x4\n")
    with pytest.raises(ClaimInputError) as info:
        list(iter_lines(stream))
    assert "Line 2 is not valid UTF-8" in str(info.value)


def test_load_claims_from_file(tmp_path):
    path = tmp_path / "claims.txt"
    path.write_text("#5 @ 0,0: 1x1\n", encoding="utf-8")
    assert load_claims(path)[0].id == 5


def test_load_missing_file(tmp_path):
    with pytest.raises(ClaimInputError):
        load_claims(tmp_path / "missing.txt")
