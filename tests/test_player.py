import pytest

from starbattle.player import (
    Gift,
    Orientation,
    Player,
    build_fleet,
    gift_for_roll,
    gift_ship_for_roll,
    ship_cells,
)
from starbattle.starship import (
    MonCalamariCruiser,
    StarDestroyer,
    TIEFighter,
    XWingSquadron,
)


def _deployed_pair():
    """Two level-1 players on a 5x8 board, each ship on its own row."""
    players = []
    for name in ("rebel", "commander"):
        player = Player(name, 1, 5, 8)
        for row, ship in enumerate(player.fleet, start=1):
            player.deploy_ship(ship, row, 1, "H")
        players.append(player)
    return players


@pytest.mark.parametrize("level,count", [(1, 5), (2, 10), (3, 13)])
def test_fleet_size_per_level(level, count):
    fleet = build_fleet(level)
    assert len(fleet) == count
    assert all(ship.active for ship in fleet)


def test_level_three_composition():
    fleet = build_fleet(3)
    assert sum(isinstance(s, StarDestroyer) for s in fleet) == 4
    assert sum(isinstance(s, MonCalamariCruiser) for s in fleet) == 3
    assert sum(isinstance(s, XWingSquadron) for s in fleet) == 2
    assert sum(isinstance(s, TIEFighter) for s in fleet) == 4


@pytest.mark.parametrize("level", [0, 4])
def test_invalid_level(level):
    with pytest.raises(ValueError):
        build_fleet(level)


@pytest.mark.parametrize(
    "roll,gift",
    [
        (1, Gift.SECRET_SHIP),
        (10, Gift.SECRET_SHIP),
        (11, Gift.BONUS_SHOT),
        (40, Gift.BONUS_SHOT),
        (41, Gift.SHOT_PENALTY),
        (60, Gift.SHOT_PENALTY),
        (61, Gift.SHOT_CAP),
        (80, Gift.SHOT_CAP),
        (81, Gift.EXTRA_TURN),
        (100, Gift.EXTRA_TURN),
    ],
)
def test_gift_for_roll(roll, gift):
    assert gift_for_roll(roll) is gift


@pytest.mark.parametrize(
    "roll,ship_type",
    [
        (10, StarDestroyer),
        (11, MonCalamariCruiser),
        (30, MonCalamariCruiser),
        (31, XWingSquadron),
        (60, XWingSquadron),
        (61, TIEFighter),
        (100, TIEFighter),
    ],
)
def test_gift_ship_for_roll(roll, ship_type):
    ship = gift_ship_for_roll(roll)
    assert type(ship) is ship_type
    assert ship.active is False


@pytest.mark.parametrize("roll", [0, 101])
def test_roll_out_of_range(roll):
    with pytest.raises(ValueError):
        gift_for_roll(roll)
    with pytest.raises(ValueError):
        gift_ship_for_roll(roll)


def test_ship_cells_directions():
    assert ship_cells(2, 3, 3, "H") == [(2, 3), (2, 4), (2, 5)]
    assert ship_cells(2, 3, 3, Orientation.VERTICAL) == [(2, 3), (3, 3), (4, 3)]
    assert ship_cells(2, 3, 3, "D") == [(2, 3), (3, 4), (4, 5)]


def test_ship_cells_bad_orientation():
    with pytest.raises(ValueError):
        ship_cells(1, 1, 3, "X")


def test_deploy_marks_grid_and_ship():
    player = Player("p", 1, 5, 8)
    ship = player.fleet[2]
    player.deploy_ship(ship, 2, 2, "V")
    assert ship.cells == [(2, 2), (3, 2), (4, 2)]
    assert all(player.defense_grid.cell(r, c) == "3" for r, c in ship.cells)


def test_deploy_out_of_bounds_and_overlap():
    player = Player("p", 1, 5, 8)
    with pytest.raises(ValueError):
        player.deploy_ship(player.fleet[0], 1, 5, "H")
    player.deploy_ship(player.fleet[0], 1, 1, "H")
    assert not player.can_place_ship(1, 3, 3, "V")
    with pytest.raises(ValueError):
        player.deploy_ship(player.fleet[2], 1, 3, "V")
    assert player.fleet[2].cells == []


def test_maximum_shots_follows_largest_active_ship():
    rebel, commander = _deployed_pair()
    assert commander.maximum_shots() == 5
    commander.fleet[0].active = False
    assert commander.maximum_shots() == 4
    for ship in commander.fleet:
        ship.active = False
    assert commander.maximum_shots() == 0
    assert commander.has_lost()


def test_miss_marks_attack_grid():
    rebel, commander = _deployed_pair()
    assert rebel.fire_at(commander, 5, 8) is False
    assert rebel.attack_grid.cell(5, 8) == "0"
    assert rebel.already_shot(5, 8)
    with pytest.raises(ValueError):
        rebel.fire_at(commander, 5, 8)


def test_shot_outside_board_raises():
    rebel, commander = _deployed_pair()
    with pytest.raises(ValueError):
        rebel.fire_at(commander, 6, 1)


def test_sinking_tie_fighter_reveals_it():
    rebel, commander = _deployed_pair()
    assert rebel.fire_at(commander, 4, 1) is True
    assert commander.last_sunk is commander.fleet[3]
    assert rebel.attack_grid.cell(4, 1) == "1"
    assert commander.lost_cells() == 1
    assert commander.lost_ships_of_size(1) == 1


def test_star_destroyer_needs_four_hits():
    rebel, commander = _deployed_pair()
    destroyer = commander.fleet[0]
    for col in range(1, 4):
        assert rebel.fire_at(commander, 1, col)
        assert destroyer.active
        assert rebel.attack_grid.cell(1, col) == "*"
    rebel.fire_at(commander, 1, 4)
    assert not destroyer.active
    assert [rebel.attack_grid.cell(1, c) for c in range(1, 6)] == ["5"] * 5
    assert commander.lost_cells() == 5


def test_sinking_whole_fleet_loses():
    rebel, commander = _deployed_pair()
    for ship in commander.fleet:
        for row, col in ship.cells[: ship.HITS_TO_DESTROY]:
            rebel.fire_at(commander, row, col)
    assert commander.has_lost()
    assert not rebel.has_lost()
    assert commander.lost_cells() == sum(len(s.cells) for s in commander.fleet)


def test_apply_gifts():
    rebel, commander = _deployed_pair()
    rebel.apply_gift(Gift.BONUS_SHOT, commander)
    rebel.apply_gift(Gift.SHOT_PENALTY, commander)
    rebel.apply_gift(Gift.SHOT_PENALTY, commander)
    rebel.apply_gift(Gift.SHOT_CAP, commander)
    rebel.apply_gift(Gift.EXTRA_TURN, commander)
    assert rebel.bonus_shots == 1
    assert commander.shot_penalty == 2
    assert commander.shot_cap == 1
    assert rebel.extra_turn is True
    with pytest.raises(ValueError):
        rebel.apply_gift(Gift.SECRET_SHIP, commander)
    commander.reset_shot_modifiers()
    assert (commander.shot_penalty, commander.shot_cap) == (0, None)


def test_add_gift_ship_joins_fleet():
    player = Player("p", 1, 5, 8)
    ship = gift_ship_for_roll(100)
    player.add_gift_ship(ship, 5, 8, Orientation.HORIZONTAL)
    assert ship.active
    assert player.ship_count == 6
    assert player.fleet[-1] is ship
    with pytest.raises(ValueError):
        player.add_gift_ship(gift_ship_for_roll(100), 0, 1, "H")
    assert player.ship_count == 6


def test_lost_ships_summary():
    rebel, commander = _deployed_pair()
    rebel.fire_at(commander, 4, 1)
    rebel.fire_at(commander, 5, 1)
    assert commander.lost_ships_summary() == (
        "Lost Star Destroyer: 0\tLost Mon Calamari Cruiser: 0\t"
        "Lost X-Wing Squadron: 0\tLost TIE Fighter: 2"
    )