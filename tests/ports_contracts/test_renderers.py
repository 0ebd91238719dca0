from __future__ import annotations

from adapters.render import (
    OPPONENT_IMAGES,
    PLAYER_IMAGES,
    ImageStimulusRenderer,
    TextStimulusRenderer,
)
from domain.types import AGENT_STATES
from ports.render import Stimulus


def test_every_state_has_an_image_entry():
    assert set(PLAYER_IMAGES) == set(AGENT_STATES)
    assert set(OPPONENT_IMAGES) == set(AGENT_STATES)


def test_image_renderer_paths():
    r = ImageStimulusRenderer("images")
    assert r.render("neutral", "neutral") == Stimulus(
        player="images/player/neutral.png", opponent="images/opponent/neutral.png"
    )
    assert r.render("combo", "combo").opponent == "images/opponent/strike1.png"
    assert r.render("combo2", "hit2").player == "images/player/cross.png"


def test_player_windup_renders_as_nothing():
    stim = ImageStimulusRenderer().render("windup", "windup")
    assert stim.player == ""
    assert stim.opponent == "images/opponent/windup.png"


def test_player_hit_stages_share_an_image():
    r = ImageStimulusRenderer()
    assert r.player_image("hit1") == r.player_image("hit2") == "images/player/hit.png"


def test_image_paths_skip_empty_reference():
    paths = ImageStimulusRenderer("a").image_paths()
    assert "" not in paths
    assert "a/opponent/strike2.png" in paths
    assert len(paths) == len(set(paths))


def test_html_stacks_opponent_over_player():
    html = Stimulus(player="p.png", opponent="o.png").to_html()
    assert html.index('src="o.png"') < html.index('src="p.png"')


def test_text_renderer_covers_every_state():
    r = TextStimulusRenderer()
    for player in AGENT_STATES:
        for opponent in AGENT_STATES:
            stim = r.render(player, opponent)
            assert stim.opponent
            assert bool(stim.player) == (player != "windup")
