"""Tests for FEN decoding and SAN move application."""

import pytest

from oneply.core.board import Board
from oneply.core.enums import Color, MoveFailure, PieceType
from oneply.core.notation import (
    STARTING_FEN,
    CastleSide,
    MoveApplicationError,
    apply_move,
    parse_move_token,
    position_from_fen,
    position_to_fen,
)
from oneply.core.piece import Piece
from oneply.core.position import Position
from oneply.core.types import (
    A1, A3, A5, A8, B1, C1, C8, D1, D2, D5, D6, D8, E1, E2, E3, E4, E5, E7, E8,
    F1, F3, F4, F8, G1, G8, H1, H8,
    parse_square,
)

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


class TestFenDecoding:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE

    def test_starting_board(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board == Board.initial()

    def test_black_to_move(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 b")
        assert pos.side_to_move == Color.BLACK

    @pytest.mark.parametrize("fen", ["8/8/8/8/8/8/8/8", "8/8/8/8/8/8/8/8 x", "8/8/8/8/8/8/8/8  w"])
    def test_unrecognised_side_is_not_white(self, fen: str) -> None:
        assert position_from_fen(fen).side_to_move == Color.BLACK

    def test_trailing_fields_ignored(self) -> None:
        short = position_from_fen("4k3/8/8/8/8/8/8/4K3 w")
        full = position_from_fen("4k3/8/8/8/8/8/8/4K3 w KQkq e3 12 40")
        assert short.board == full.board
        assert short.side_to_move == full.side_to_move

    def test_extra_columns_dropped(self) -> None:
        pos = position_from_fen("ppppppppp/8/8/8/8/8/8/8 w")
        assert pos.board.pieces(Color.BLACK, PieceType.PAWN) == list(range(8))

    def test_extra_rows_dropped(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8/PPPPPPPP w")
        assert pos.board.occupied() == []

    def test_short_placement_leaves_rest_empty(self) -> None:
        pos = position_from_fen("k w")
        assert pos.board.occupied() == [A8]

    def test_unknown_character_takes_a_square(self) -> None:
        pos = position_from_fen("4?p2/8/8/8/8/8/8/8 w")
        assert pos.board[E8] is None
        assert pos.board[parse_square("f8")] == BLACK_PAWN

    def test_unknown_character_does_not_block_rays(self) -> None:
        pos = position_from_fen("R?5r/8/8/8/8/8/8/k6K w")
        assert pos.board[parse_square("b8")] is None
        result = apply_move(pos.board, "Rxh8", Color.WHITE)
        assert result[parse_square("h8")] == Piece(Color.WHITE, PieceType.ROOK)
        assert result[A8] is None

    def test_default_position_is_initial(self) -> None:
        pos = Position()
        assert pos.board == Board.initial()
        assert pos.side_to_move == Color.WHITE

    def test_decoding_is_repeatable(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        first = position_from_fen(fen)
        second = position_from_fen(fen)
        assert first.board == second.board
        assert first.board is not second.board


class TestFenSerialisation:
    def test_starting(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert position_to_fen(pos) == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

    def test_roundtrip_custom(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R b"
        assert position_to_fen(position_from_fen(fen)) == fen


class TestParseMoveToken:
    def test_pawn_push(self) -> None:
        move = parse_move_token("e4")
        assert move.piece_type == PieceType.PAWN
        assert move.destination == E4
        assert move.row_hint is None
        assert move.col_hint is None

    def test_file_disambiguation(self) -> None:
        move = parse_move_token("Nbd2")
        assert move.piece_type == PieceType.KNIGHT
        assert move.destination == D2
        assert move.col_hint == 1
        assert move.row_hint is None

    def test_rank_disambiguation(self) -> None:
        move = parse_move_token("R1a3")
        assert move.piece_type == PieceType.ROOK
        assert move.destination == A3
        assert move.row_hint == 7

    def test_pawn_capture(self) -> None:
        move = parse_move_token("exd5")
        assert move.piece_type == PieceType.PAWN
        assert move.capture
        assert move.col_hint == 4
        assert move.destination == D5

    def test_promotion_with_check(self) -> None:
        move = parse_move_token("e8=Q+")
        assert move.destination == E8
        assert move.promotion == PieceType.QUEEN

    @pytest.mark.parametrize(
        "token, side",
        [
            ("O-O", CastleSide.KINGSIDE),
            ("O-O+", CastleSide.KINGSIDE),
            ("O-O#", CastleSide.KINGSIDE),
            ("O-O-O", CastleSide.QUEENSIDE),
            ("O-O-O#", CastleSide.QUEENSIDE),
        ],
    )
    def test_castling_literals(self, token: str, side: CastleSide) -> None:
        assert parse_move_token(token).castle == side

    @pytest.mark.parametrize(
        "token, reason",
        [
            ("N", MoveFailure.TOKEN_TOO_SHORT),
            ("e", MoveFailure.TOKEN_TOO_SHORT),
            ("Q+", MoveFailure.TOKEN_TOO_SHORT),
            ("Zz9", MoveFailure.DESTINATION_OUT_OF_RANGE),
            ("0-0", MoveFailure.DESTINATION_OUT_OF_RANGE),
            ("e8=X", MoveFailure.INVALID_PROMOTION),
        ],
    )
    def test_malformed_tokens(self, token: str, reason: MoveFailure) -> None:
        with pytest.raises(MoveApplicationError) as excinfo:
            parse_move_token(token)
        assert excinfo.value.reason == reason
        assert excinfo.value.token == token

    def test_long_token_truncated(self) -> None:
        # Only the first 15 characters are read, leaving "a1" as destination.
        move = parse_move_token("Ra1" + "x" * 10 + "a1h8")
        assert move.destination == A1


class TestApplyMove:
    def test_pawn_double_push(self) -> None:
        board = Board.initial()
        result = apply_move(board, "e4", Color.WHITE)
        assert result[E2] is None
        assert result[E4] == WHITE_PAWN

    def test_input_board_untouched(self) -> None:
        board = Board.initial()
        apply_move(board, "e4", Color.WHITE)
        assert board == Board.initial()

    def test_knight_move(self) -> None:
        result = apply_move(Board.initial(), "Nf3", Color.WHITE)
        assert result[G1] is None
        assert result[F3] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_black_pawn_move(self) -> None:
        result = apply_move(Board.initial(), "e5", Color.BLACK)
        assert result[E7] is None
        assert result[E5] == BLACK_PAWN

    def test_white_kingside_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w")
        result = apply_move(pos.board, "O-O", Color.WHITE)
        assert result[G1] == Piece(Color.WHITE, PieceType.KING)
        assert result[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert result[E1] is None
        assert result[H1] is None

    def test_black_queenside_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b")
        result = apply_move(pos.board, "O-O-O+", Color.BLACK)
        assert result[C8] == Piece(Color.BLACK, PieceType.KING)
        assert result[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert result[A8] is None
        assert result[E8] is None

    def test_black_kingside_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b")
        result = apply_move(pos.board, "O-O", Color.BLACK)
        assert result[G8] == Piece(Color.BLACK, PieceType.KING)
        assert result[F8] == Piece(Color.BLACK, PieceType.ROOK)
        assert result[E8] is None
        assert result[H8] is None
        assert result[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_white_queenside_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w")
        result = apply_move(pos.board, "O-O-O", Color.WHITE)
        assert result[C1] == Piece(Color.WHITE, PieceType.KING)
        assert result[D1] == Piece(Color.WHITE, PieceType.ROOK)
        assert result[A1] is None
        assert result[E1] is None

    def test_black_en_passant_removes_passed_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4Pp2/8/8/4K3 b")
        result = apply_move(pos.board, "fxe3", Color.BLACK)
        assert result[E3] == BLACK_PAWN
        assert result[E4] is None
        assert result[F4] is None
        assert len(result.occupied()) == 3

    def test_en_passant_removes_passed_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w")
        result = apply_move(pos.board, "exd6", Color.WHITE)
        assert result[D6] == WHITE_PAWN
        assert result[D5] is None
        assert result[parse_square("e5")] is None
        assert len(result.occupied()) == 3

    def test_normal_capture_replaces_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w")
        result = apply_move(pos.board, "exd5", Color.WHITE)
        assert result[D5] == WHITE_PAWN
        assert result[E4] is None
        assert len(result.occupied()) == 3

    def test_white_promotion(self) -> None:
        pos = position_from_fen("8/4P3/8/8/8/8/8/k6K w")
        result = apply_move(pos.board, "e8=Q", Color.WHITE)
        assert result[E8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert result[E7] is None

    def test_black_promotion_letter_case_follows_side(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/p7/7K b")
        result = apply_move(pos.board, "a1=N", Color.BLACK)
        assert result[A1] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_file_hint_selects_knight(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/5N2/8/1N2K3 w")
        result = apply_move(pos.board, "Nbd2", Color.WHITE)
        assert result[B1] is None
        assert result[F3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert result[D2] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_without_hint_first_in_scan_order_moves(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/5N2/8/1N2K3 w")
        result = apply_move(pos.board, "Nd2", Color.WHITE)
        assert result[F3] is None
        assert result[B1] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_rank_hint_selects_rook(self) -> None:
        pos = position_from_fen("4k3/8/8/R7/8/8/8/R3K3 w")
        result = apply_move(pos.board, "R1a3", Color.WHITE)
        assert result[A1] is None
        assert result[A5] == Piece(Color.WHITE, PieceType.ROOK)
        assert result[A3] == Piece(Color.WHITE, PieceType.ROOK)

    def test_unreachable_source_fails(self) -> None:
        with pytest.raises(MoveApplicationError) as excinfo:
            apply_move(Board.initial(), "Qh5", Color.WHITE)
        assert excinfo.value.reason == MoveFailure.SOURCE_NOT_FOUND

    def test_piece_count_preserved_on_quiet_move(self) -> None:
        board = Board.initial()
        for token in ("e4", "Nc3", "d3", "Na3"):
            assert len(apply_move(board, token, Color.WHITE).occupied()) == 32
