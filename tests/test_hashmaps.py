import pytest

from rustlings.solutions.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    fill_fruit_basket,
    fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_fruit_basket_contents():
    assert fruit_basket() == {"banana": 2, "mango": 1, "apple": 2}


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


def test_new_fruits_get_ten():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.BANANA] == 10
    assert basket[Fruit.PINEAPPLE] == 10


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 1
    assert team.goals_conceded == 2


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_empty_results():
    assert build_scores_table("") == {}


def test_single_line():
    assert build_scores_table("A,B,3,1") == {
        "A": Team(goals_scored=3, goals_conceded=1),
        "B": Team(goals_scored=1, goals_conceded=3),
    }


@pytest.mark.parametrize("line", ["A,B,x,1", "A,B,256,1", "A,B,-1,0", "A,B,1"])
def test_bad_lines_raise(line):
    with pytest.raises(ValueError):
        build_scores_table(line)