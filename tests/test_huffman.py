import pytest

from algolab.huffman import END_SYMBOL, HuffmanCode, main

TEXTS = ["", "a", "abracadabra", "hello world\n", "aaaaaaaab", "The quick brown fox."]


@pytest.mark.parametrize("text", TEXTS)
def test_round_trip(text):
    code = HuffmanCode.from_text(text)
    assert code.decode(code.encode(text)) == text


@pytest.mark.parametrize("text", TEXTS[1:])
def test_code_is_prefix_free(text):
    codes = list(HuffmanCode.from_text(text).codes.values())
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)


@pytest.mark.parametrize("text", TEXTS)
def test_codes_cover_alphabet_and_end(text):
    code = HuffmanCode.from_text(text)
    assert set(code.codes) == set(text) | {END_SYMBOL}


def test_frequent_symbol_gets_no_longer_code():
    codes = HuffmanCode.from_text("aaaaaaab").codes
    assert len(codes["a"]) <= len(codes["b"])


@pytest.mark.parametrize("text", TEXTS)
def test_encoded_length_matches_bit_count(text):
    code = HuffmanCode.from_text(text)
    bits = sum(len(code.codes[c]) for c in text) + len(code.codes[END_SYMBOL])
    assert len(code.encode(text)) == (bits + 7) // 8


def test_single_symbol_worked_example():
    code = HuffmanCode.from_text("a")
    assert dict(code.codes) == {"a": "0", END_SYMBOL: "1"}
    assert code.encode("a") == b"\x02"


def test_key_lines_format():
    code = HuffmanCode.from_text("abracadabra")
    lines = code.key_lines()
    assert len(lines) == len(code.codes)
    for line, (symbol, bits) in zip(lines, code.codes.items()):
        assert line == f"{symbol} {bits}"
        assert set(bits) <= {"0", "1"}


def test_text_with_end_symbol_is_rejected():
    with pytest.raises(ValueError):
        HuffmanCode.from_text("ab" + END_SYMBOL)


def test_unknown_symbol_cannot_be_encoded():
    code = HuffmanCode.from_text("abc")
    with pytest.raises(ValueError):
        code.encode("abz")


def test_truncated_data_is_rejected():
    code = HuffmanCode.from_text("abc")
    with pytest.raises(ValueError):
        code.decode(b"")


def test_main_writes_all_files(tmp_path):
    text = "mississippi river\n"
    (tmp_path / "input.txt").write_bytes(text.encode("latin-1"))
    assert main([str(tmp_path)]) == 0
    assert (tmp_path / "deshifr.txt").read_bytes().decode("latin-1") == text
    code = HuffmanCode.from_text(text)
    assert (tmp_path / "shifr.txt").read_bytes() == code.encode(text)
    key = (tmp_path / "key.txt").read_bytes().decode("latin-1")
    assert key == "".join(line + "\n" for line in code.key_lines())