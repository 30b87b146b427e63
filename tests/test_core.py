import math

import numpy as np
import pytest

from dpalign import ScoreMatrix, ScoringModel, Sequence, align
from dpalign.errors import DPAlignError, ScoringError, SequenceIndexError, SequenceTypeError


class TestSequence:

    def test_one_based_indexing(self):
        seq = Sequence("ACGT")
        assert seq[1] == "A"
        assert seq[4] == "T"
        assert len(seq) == 4
        assert str(seq) == "ACGT"
        assert list(seq) == ["A", "C", "G", "T"]

    @pytest.mark.parametrize("position", [0, 5, -1, 10])
    def test_out_of_range_raises(self, position):
        with pytest.raises(SequenceIndexError) as exc:
            Sequence("ACGT")[position]
        assert exc.value.position == position
        assert exc.value.length == 4

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            Sequence("")[1]
        with pytest.raises(DPAlignError):
            Sequence("A")[2]

    @pytest.mark.parametrize("position", [slice(0, 2), "1", 1.0, True])
    def test_non_integer_positions_rejected(self, position):
        with pytest.raises(SequenceIndexError):
            Sequence("ACGT")[position]

    def test_immutable(self):
        seq = Sequence("ACGT")
        with pytest.raises(AttributeError):
            seq._symbols = "TTTT"
        assert str(seq) == "ACGT"

    def test_equality_and_window(self):
        assert Sequence("ACG") == Sequence("ACG")
        assert Sequence("ACG") != Sequence("ACT")
        assert Sequence(Sequence("ACG")) == Sequence("ACG")
        assert Sequence("ACCAGT").window(2, 5) == "CAG"

    def test_from_list_of_symbols(self):
        seq = Sequence(["A", "C"])
        assert len(seq) == 2
        assert str(seq) == "AC"
        assert seq[2] == "C"
        assert Sequence(iter("GT")) == Sequence("GT")
        assert Sequence([]) == Sequence("")

    @pytest.mark.parametrize("symbols", [None, 42, 1.5, ["A", None], ["AC", "G"], b"ACGT"])
    def test_rejects_non_symbol_input(self, symbols):
        with pytest.raises(SequenceTypeError) as exc:
            Sequence(symbols)
        assert isinstance(exc.value, TypeError)
        assert isinstance(exc.value, DPAlignError)

    def test_align_rejects_none(self):
        with pytest.raises(SequenceTypeError):
            align(None, "A")
        with pytest.raises(SequenceTypeError):
            align("A", None, mode="local")

    def test_align_accepts_list_input(self):
        result = align(list("ACCAGT"), list("ACAGC"))
        assert result.target_aligned == "ACCAGT"
        assert result.query_aligned == "AC-AGC"


class TestScoringModel:

    def test_defaults(self):
        scoring = ScoringModel()
        assert (scoring.match, scoring.mismatch) == (1, -1)
        assert (scoring.gap_open, scoring.gap_extend) == (2, 1)

    def test_substitution(self):
        scoring = ScoringModel(match=5, mismatch=-4)
        assert scoring.substitution("A", "A") == 5
        assert scoring.substitution("A", "C") == -4

    def test_substitution_matrix(self):
        scoring = ScoringModel()
        sub = scoring.substitution_matrix(Sequence("AC"), Sequence("CAC"))
        expected = np.array([[-1, 1, -1], [1, -1, 1]], dtype=np.float64)
        assert sub.dtype == np.float64
        np.testing.assert_array_equal(sub, expected)

    def test_substitution_matrix_empty(self):
        scoring = ScoringModel()
        assert scoring.substitution_matrix(Sequence(""), Sequence("ACG")).shape == (0, 3)
        assert scoring.substitution_matrix(Sequence("AC"), Sequence("")).shape == (2, 0)

    @pytest.mark.parametrize("field,value", [
        ("match", math.nan),
        ("mismatch", math.inf),
        ("gap_open", "2"),
        ("gap_extend", None),
        ("gap_open", True),
    ])
    def test_invalid_parameters(self, field, value):
        with pytest.raises(ScoringError) as exc:
            ScoringModel(**{field: value})
        assert exc.value.param_name == field
        assert isinstance(exc.value, ValueError)

    def test_frozen(self):
        scoring = ScoringModel()
        with pytest.raises(AttributeError):
            scoring.match = 3


class TestScoreMatrix:

    def test_shape_and_fill(self):
        matrix = ScoreMatrix(3, 2, fill=-np.inf, name="X")
        assert matrix.shape == (4, 3)
        assert matrix.get(3, 2) == -np.inf

    def test_get_set(self):
        matrix = ScoreMatrix(2, 2)
        matrix.set(1, 2, 7)
        assert matrix.get(1, 2) == 7
        matrix[2, 1] = -3
        assert matrix[2, 1] == -3

    @pytest.mark.parametrize("i,j", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds(self, i, j):
        matrix = ScoreMatrix(2, 2)
        with pytest.raises(IndexError):
            matrix.get(i, j)

    def test_row_is_view(self):
        matrix = ScoreMatrix(2, 3)
        matrix.row(1)[:] = [1, 2, 3, 4]
        assert matrix.get(1, 3) == 4
        matrix.set_row(2, 9)
        assert matrix.to_array()[2].tolist() == [9, 9, 9, 9]

    def test_to_array_is_copy(self):
        matrix = ScoreMatrix(1, 1)
        array = matrix.to_array()
        array[0, 0] = 5
        assert matrix.get(0, 0) == 0

    def test_str_dump(self):
        matrix = ScoreMatrix(1, 1, name="M")
        matrix.set(1, 1, -2)
        text = str(matrix)
        assert text.startswith("M:")
        assert "-2" in text
