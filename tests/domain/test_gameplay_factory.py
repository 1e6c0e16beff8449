import pytest

from patternkit.domain.base.exceptions import SelectionError
from patternkit.domain.base.selection import FixedSelector, RoundRobinSelector, seeded_selector
from patternkit.domain.factory_method import (
    DEFAULT_GAMEPLAY_OPTIONS,
    MISSION_GAMEPLAY,
    FoggyGameplay,
    Gameplay,
    GameplayValidationError,
    Mission,
    MissionGameplayFactory,
    RainyGameplay,
    RandomGameplayFactory,
    SnowyGameplay,
    SunnyGameplay,
    UnknownMissionError,
)

DECLARED_VARIANTS = {SunnyGameplay, FoggyGameplay, SnowyGameplay, RainyGameplay}


def test_mission_table_covers_every_mission():
    assert set(MISSION_GAMEPLAY) == set(Mission)
    for variant in MISSION_GAMEPLAY.values():
        assert issubclass(variant, Gameplay)


@pytest.mark.parametrize("mission, expected", [
    ("tutorial", SunnyGameplay),
    ("ambush", FoggyGameplay),
    ("siege", SnowyGameplay),
    ("final", RainyGameplay),
])
def test_mission_factory_selects_documented_variant(mission, expected):
    gameplay = MissionGameplayFactory(mission).create()
    assert type(gameplay) is expected


def test_mission_factory_is_total_over_missions():
    for mission in Mission:
        gameplay = MissionGameplayFactory(mission).create()
        assert type(gameplay) in DECLARED_VARIANTS


def test_mission_factory_accepts_loose_mission_names():
    assert isinstance(MissionGameplayFactory(" FINAL ").create(), RainyGameplay)


def test_mission_factory_rejects_unknown_mission():
    with pytest.raises(UnknownMissionError) as exc:
        MissionGameplayFactory("bonus")
    assert "bonus" in str(exc.value)
    assert exc.value.error_code == "UNKNOWN_MISSION"
    assert exc.value.details["known_missions"] == ["tutorial", "ambush", "siege", "final"]


def test_mission_factory_is_deterministic():
    factory = MissionGameplayFactory(Mission.SIEGE)
    assert factory.create() == factory.create()


def test_random_factory_covers_every_declared_variant(round_robin):
    factory = RandomGameplayFactory(selector=round_robin)
    produced = {type(factory.create()) for _ in range(len(DEFAULT_GAMEPLAY_OPTIONS))}
    assert produced == DECLARED_VARIANTS


def test_random_factory_never_produces_undeclared_variant():
    factory = RandomGameplayFactory(selector=seeded_selector(1234))
    for _ in range(500):
        assert type(factory.create()) in DECLARED_VARIANTS


def test_random_factory_with_same_seed_is_reproducible():
    first = RandomGameplayFactory(selector=seeded_selector(7))
    second = RandomGameplayFactory(selector=seeded_selector(7))
    assert [first.create() for _ in range(20)] == [second.create() for _ in range(20)]


def test_random_factory_accepts_recipes():
    factory = RandomGameplayFactory(options=[SnowyGameplay, RainyGameplay],
                                    selector=RoundRobinSelector())
    assert isinstance(factory.create(), SnowyGameplay)
    assert isinstance(factory.create(), RainyGameplay)
    assert factory.variant_types() == [SnowyGameplay, RainyGameplay]


def test_random_factory_supports_new_variants_without_changes():
    class StormyGameplay(Gameplay):
        def description(self) -> str:
            return "stormy gameplay"

        def difficulty(self) -> int:
            return 5

    factory = RandomGameplayFactory(options=[StormyGameplay()], selector=FixedSelector(0))
    assert factory.create().difficulty() == 5


def test_random_factory_returns_prebuilt_instances():
    sunny = SunnyGameplay()
    factory = RandomGameplayFactory(options=[sunny], selector=FixedSelector(0))
    assert factory.create() is sunny


def test_random_factory_rejects_empty_options():
    with pytest.raises(GameplayValidationError):
        RandomGameplayFactory(options=[])


def test_random_factory_rejects_selection_outside_options():
    factory = RandomGameplayFactory(selector=lambda options: RainyGameplay)
    with pytest.raises(SelectionError):
        factory.create()


def test_gameplay_to_dict():
    assert RainyGameplay().to_dict() == {
        "variant": "RainyGameplay",
        "description": "rainy gameplay with slippery roads and thunder",
        "difficulty": 4,
    }
