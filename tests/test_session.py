import asyncio

import pytest

from console import session as session_module
from console.session import OUT_OF_POINTS, QUIT_MESSAGE, GameSession
from machine.basic import ReelsResult
from machine.ledger import PointsLedger
from machine.models import GameConfig, Mode

from .helpers import create_context, press


def test_cost_is_minimum_or_ten_percent():
    ledger = PointsLedger()
    assert ledger.cost == 20
    ledger.points = 350
    assert ledger.cost == 35
    ledger.points = 19
    assert not ledger.can_afford()


def test_charge_and_award_track_maximum():
    ledger = PointsLedger.from_config(GameConfig(starting_points=500))
    assert ledger.charge() == 50
    assert ledger.points == 450
    ledger.award(10)
    assert ledger.max_points == 500
    ledger.award(200)
    assert ledger.points == 660
    assert ledger.max_points == 660


def test_config_validation_rejects_negative_values():
    with pytest.raises(ValueError, match="frame_interval"):
        GameConfig(frame_interval=-1).validate()
    with pytest.raises(ValueError, match="redraw_budget"):
        GameConfig(redraw_budget=-1).validate()


def test_poker_session_plays_a_round_then_quits():
    frames = [{"p"}, {"\n"}] + press(" ") * 5 + [{"1"}, {" "}, {"0"}, {"c"}, {"q"}]
    ctx = create_context(frames, fixed_order=True)
    session = GameSession(ctx)
    message = asyncio.run(session.run())

    assert message == QUIT_MESSAGE
    assert session.mode is Mode.POKER
    assert session.rounds_played == 1
    assert ctx.ledger.points == 100 - 20 + 1_000
    assert ctx.ledger.max_points == 1_080
    assert "Final points: 1080    Maximum points: 1080" in ctx.renderer.texts
    assert "Press C to continue." in ctx.renderer.texts


def test_start_screen_shows_rules_and_cost():
    ctx = create_context([], points=400)
    session = GameSession(ctx, Mode.BASIC)
    lines = session.start_screen()
    assert lines[0] == "Points: 400"
    assert "Mode: basic" in lines
    assert "Playing currently costs 40 points." in lines


def test_session_ends_when_points_run_out(monkeypatch):
    async def losing_round(ctx):
        ctx.ledger.award(0)
        return ReelsResult(score=0, jackpots=0)

    monkeypatch.setattr(session_module, "play_basic_round", losing_round)
    ctx = create_context([{"\n"}, {"c"}, {"\n"}, {"c"}], points=40)
    session = GameSession(ctx, Mode.BASIC)
    message = asyncio.run(session.run())

    assert message == OUT_OF_POINTS
    assert session.rounds_played == 2
    assert ctx.ledger.points == 0
    assert ctx.ledger.max_points == 40
