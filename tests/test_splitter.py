import pytest

from textsum.errors import InputValidationError
from textsum.pipeline import split_blocks


def _text(n):
    return "".join(chr(ord("a") + i % 26) for i in range(n))


def test_short_text_is_one_block():
    text = _text(500)
    blocks = split_blocks(text, 1000)
    assert len(blocks) == 1
    assert blocks[0].text == text
    assert blocks[0].start == 0


def test_text_equal_to_nch_is_one_block():
    text = _text(1000)
    assert [b.text for b in split_blocks(text, 1000)] == [text]


@pytest.mark.parametrize("strategy", ["even", "fixed"])
@pytest.mark.parametrize("length,nch", [(2500, 1000), (1001, 1000), (7, 2), (10000, 333)])
def test_blocks_cover_text_in_order(strategy, length, nch):
    text = _text(length)
    blocks = split_blocks(text, nch, strategy)

    assert "".join(b.text for b in blocks) == text
    assert sum(len(b.text) for b in blocks) == length
    assert len(blocks) == -(-length // nch)
    assert all(len(b.text) <= nch for b in blocks)
    assert [b.index for b in blocks] == list(range(len(blocks)))
    for prev, nxt in zip(blocks, blocks[1:]):
        assert prev.end == nxt.start


def test_even_strategy_spreads_evenly():
    blocks = split_blocks(_text(2500), 1000)
    assert [len(b.text) for b in blocks] == [833, 833, 834]


def test_fixed_strategy_has_short_tail():
    blocks = split_blocks(_text(2500), 1000, "fixed")
    assert [len(b.text) for b in blocks] == [1000, 1000, 500]


@pytest.mark.parametrize("nch", [0, -5, 2.5, True, "100"])
def test_rejects_bad_nch(nch):
    with pytest.raises(InputValidationError):
        split_blocks("some text", nch)


def test_rejects_unknown_strategy():
    with pytest.raises(InputValidationError):
        split_blocks("some text", 3, "random")
