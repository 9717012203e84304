"""Tests for ECO catalog ingestion and classification."""

import logging

import pytest

from pgnview.openings import (
    UNKNOWN_OPENING,
    Opening,
    OpeningTree,
    build_tree,
    identify,
    identify_movetext,
    normalize_catalog,
    parse_catalog_line,
    strip_move_number,
)

RUY_LOPEZ = ["e4", "e5", "Nf3", "Nc6", "Bb5"]


class TestNormalizeCatalog:
    def test_continuation_lines_fold_into_previous(self) -> None:
        split = 'C60 "Ruy Lopez" 1.e4 e5 2.Nf3\n Nc6 3.Bb5\n'
        joined = 'C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'
        assert normalize_catalog(split) == normalize_catalog(joined)

    def test_comments_and_blank_lines_are_dropped(self) -> None:
        catalog = '# header\n\nB00 "King\'s Pawn" 1.e4\r\n\r\n# more\n'
        assert normalize_catalog(catalog) == ['B00 "King\'s Pawn" 1.e4']

    def test_leading_continuation_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            lines = normalize_catalog('  2.Nf3\nB00 "King\'s Pawn" 1.e4\n')
        assert lines == ['B00 "King\'s Pawn" 1.e4']
        assert "continuation" in caplog.text


class TestParseCatalogLine:
    def test_splits_code_name_and_moves(self) -> None:
        assert parse_catalog_line('C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5 *') == (
            "C60",
            "Ruy Lopez",
            RUY_LOPEZ,
        )

    def test_spaced_move_numbers(self) -> None:
        _code, _name, sans = parse_catalog_line('B20 "Sicilian" 1. e4 c5')
        assert sans == ["e4", "c5"]

    def test_line_without_moves(self) -> None:
        assert parse_catalog_line('A00a "Start position" *') == ("A00a", "Start position", [])

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ValueError, match="quoted name"):
            parse_catalog_line("C60 Ruy Lopez 1.e4")

    def test_strip_move_number(self) -> None:
        assert strip_move_number("12.Nf3") == "Nf3"
        assert strip_move_number("3...a6") == "a6"
        assert strip_move_number("e4") == "e4"
        assert strip_move_number("1.") == ""


class TestIdentify:
    def test_full_line_is_named(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify(tree, RUY_LOPEZ) == Opening("C60", "Ruy Lopez")

    def test_strict_prefix_is_unknown(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify(tree, ["e4", "e5", "Nf3", "Nc6"]) == UNKNOWN_OPENING

    def test_divergence_at_second_move_is_unknown(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify(tree, ["e4", "c5"]) == UNKNOWN_OPENING

    def test_moves_past_the_catalog_keep_deepest_name(
        self, ruy_lopez_catalog: str
    ) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify(tree, [*RUY_LOPEZ, "a6", "Ba4"]).eco_code == "C60"

    def test_shallower_name_survives_unnamed_nodes(self) -> None:
        tree = build_tree(
            'C20 "King\'s Pawn Game" 1.e4 e5\n'
            'C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'
        )
        assert identify(tree, ["e4", "e5", "Nf3"]) == Opening("C20", "King's Pawn Game")
        assert identify(tree, RUY_LOPEZ).name == "Ruy Lopez"

    def test_first_entry_keeps_node(self) -> None:
        tree = build_tree(
            'C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'
            'C60 "Spanish Game" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'
        )
        assert identify(tree, RUY_LOPEZ).name == "Ruy Lopez"

    def test_later_entry_names_intermediate_node(self) -> None:
        tree = build_tree(
            'C60 "Ruy Lopez" 1.e4 e5 2.Nf3 Nc6 3.Bb5\n'
            'C44 "King\'s Knight Opening" 1.e4 e5 2.Nf3 Nc6\n'
        )
        assert identify(tree, ["e4", "e5", "Nf3", "Nc6"]).eco_code == "C44"
        assert identify(tree, RUY_LOPEZ).eco_code == "C60"

    def test_shared_prefix_creates_nodes_once(self) -> None:
        tree = build_tree(
            'B20 "Sicilian" 1.e4 c5\n'
            'C20 "King\'s Pawn Game" 1.e4 e5\n'
        )
        # root, e4, c5, e5
        assert len(tree) == 4

    def test_continuation_catalog_matches_joined(self) -> None:
        split = build_tree('C60 "Ruy Lopez" 1.e4 e5 2.Nf3\n Nc6 3.Bb5\n')
        assert identify(split, RUY_LOPEZ) == Opening("C60", "Ruy Lopez")

    def test_numbered_input_moves(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        numbered = ["1.e4", "e5", "2.Nf3", "Nc6", "3.Bb5"]
        assert identify(tree, numbered).eco_code == "C60"

    def test_no_tree(self) -> None:
        assert identify(None, RUY_LOPEZ) == UNKNOWN_OPENING
        assert not UNKNOWN_OPENING.is_known

    def test_empty_catalog(self) -> None:
        tree = build_tree("")
        assert tree.is_empty
        assert identify(tree, RUY_LOPEZ) == UNKNOWN_OPENING

    def test_no_moves(self, ruy_lopez_catalog: str) -> None:
        assert identify(build_tree(ruy_lopez_catalog), []) == UNKNOWN_OPENING

    def test_bytes_catalog(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog.encode("utf-8"))
        assert identify(tree, RUY_LOPEZ).is_known

    def test_catalog_with_byte_order_mark(self, ruy_lopez_catalog: str) -> None:
        for catalog in (
            "\ufeff" + ruy_lopez_catalog,
            ruy_lopez_catalog.encode("utf-8-sig"),
        ):
            opening = identify(build_tree(catalog), RUY_LOPEZ)
            assert opening.eco_code == "C60"

    def test_malformed_line_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            tree = build_tree('C60 Ruy Lopez 1.e4\nB20 "Sicilian" 1.e4 c5\n')
        assert identify(tree, ["e4", "c5"]).eco_code == "B20"
        assert "Skipping catalog line" in caplog.text

    def test_root_entry_without_moves_does_not_name_root(self) -> None:
        tree = build_tree('A00a "Start position" *\nB20 "Sicilian" 1.e4 c5\n')
        assert tree.node(OpeningTree.ROOT).eco_code == ""
        assert identify(tree, ["d4"]) == UNKNOWN_OPENING


class TestIdentifyMovetext:
    def test_numbered_movetext(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify_movetext(tree, "1. e4 e5 2. Nf3 Nc6 3. Bb5 a6").name == "Ruy Lopez"

    def test_compact_movetext(self, ruy_lopez_catalog: str) -> None:
        tree = build_tree(ruy_lopez_catalog)
        assert identify_movetext(tree, "1.e4 e5 2.Nf3 Nc6 3.Bb5").eco_code == "C60"
