import pytest

from dpalign import (
    AlignmentResult,
    GlobalAffineAligner,
    GlobalAligner,
    LocalAligner,
    ScoringModel,
    align,
    get_aligner,
)
from dpalign.align.pairwise import ALIGNERS
from dpalign.errors import UnknownModeError


@pytest.mark.parametrize("mode,cls", [
    ("global", GlobalAligner),
    ("local", LocalAligner),
    ("affine", GlobalAffineAligner),
])
def test_get_aligner(mode, cls):
    aligner = get_aligner(mode)
    assert isinstance(aligner, cls)
    assert aligner.mode == mode


def test_run_order():
    assert list(ALIGNERS) == ["global", "local", "affine"]


@pytest.mark.parametrize("mode", ["Global", "semiglobal", "", None, ["global"]])
def test_unknown_mode(mode):
    with pytest.raises(UnknownModeError) as exc:
        get_aligner(mode)
    assert exc.value.choices == ("global", "local", "affine")
    assert isinstance(exc.value, ValueError)


def test_align_defaults_to_global():
    result = align("ACCAGT", "ACAGC")
    assert isinstance(result, AlignmentResult)
    assert result.mode == "global"
    assert result.query_aligned == "AC-AGC"


def test_align_local():
    result = align("ACCAGT", "ACAGC", mode="local")
    assert result.target_aligned == "CAG"
    assert result.score == 3


def test_align_passes_scoring():
    scoring = ScoringModel(gap_open=3, gap_extend=1)
    result = align("ACGT", "AT", mode="affine", scoring=scoring, keep_matrices=True)
    assert result.score == -2
    assert set(result.matrices) == {"M", "X", "Y"}


def test_aligners_are_reusable():
    aligner = get_aligner("local")
    assert aligner.run("AC", "A").score == 1
    assert aligner.run("ACCAGT", "ACAGC").score == 3
    assert aligner.run("AC", "A").target_aligned == "A"
