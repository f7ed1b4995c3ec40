import pytest

from exdrill.drills.hashmaps import Fruit, Team, build_scores_table, fill_basket, fruit_basket

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


@pytest.fixture
def full_basket():
    return {
        Fruit.APPLE: 4,
        Fruit.MANGO: 2,
        Fruit.LYCHEE: 5,
        Fruit.PINEAPPLE: 999,
        Fruit.BANANA: 999,
    }


def test_given_fruits_are_not_modified(full_basket):
    fill_basket(full_basket)
    assert full_basket[Fruit.APPLE] == 4
    assert full_basket[Fruit.MANGO] == 2
    assert full_basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits(full_basket):
    fill_basket(full_basket)
    assert len(full_basket) >= 5


def test_greater_than_eleven_fruits(full_basket):
    fill_basket(full_basket)
    assert sum(full_basket.values()) > 11


def test_fill_adds_missing_fruits_only():
    basket = {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}
    fill_basket(basket)
    assert set(basket) == set(Fruit)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5
    assert sum(basket.values()) > 11


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_record_holds_name():
    assert build_scores_table("A,B,1,0")["B"] == Team("B", 0, 1)


def test_empty_results_give_empty_table():
    assert build_scores_table("") == {}


def test_bad_goals_raise():
    with pytest.raises(ValueError):
        build_scores_table("A,B,one,0")