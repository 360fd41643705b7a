import pytest
from stylefit.schemas.analysis import ArmAnalysis
from stylefit.services.recommender import STYLE_GUIDE, Recommender


@pytest.mark.parametrize("body_type", ["hourglass", "inverted-triangle", "pear", "apple", "rectangle"])
def test_every_body_type_has_three_and_three(body_type):
    recs = Recommender().recommend(body_type)
    assert len(recs.tops) == 3
    assert len(recs.bottoms) == 3
    assert recs.tip
    assert recs.arm_type is None
    assert recs.arm_tips is None


def test_hourglass_entry():
    recs = Recommender().recommend("hourglass")
    assert recs.tops == ["Fitted blazers", "Wrap tops", "V-neck sweaters"]
    assert recs.tip == "Emphasize your waist with belts and fitted clothing"


def test_unknown_falls_back():
    recs = Recommender().recommend("unknown")
    assert recs.tops == []
    assert recs.bottoms == []
    assert recs.tip == "Complete your measurements for personalized recommendations"


def test_arm_analysis_is_merged_without_touching_the_rest():
    arm = ArmAnalysis(arm_type="slender", recommendations=["a", "b", "c", "d"])
    plain = Recommender().recommend("pear")
    merged = Recommender().recommend("pear", arm)

    assert merged.arm_type == "slender"
    assert merged.arm_tips == ["a", "b", "c", "d"]
    assert (merged.tops, merged.bottoms, merged.tip) == (plain.tops, plain.bottoms, plain.tip)


def test_arm_tips_on_unknown_body_type():
    arm = ArmAnalysis(arm_type="muscular", recommendations=["x"])
    recs = Recommender().recommend("unknown", arm)
    assert recs.tops == []
    assert recs.arm_tips == ["x"]


def test_results_do_not_share_the_table():
    recs = Recommender().recommend("apple")
    recs.tops.append("Crop tops")
    assert STYLE_GUIDE["apple"]["tops"] == ["V-necks", "Empire waist", "Tunic tops"]
    assert Recommender().recommend("apple").tops == ["V-necks", "Empire waist", "Tunic tops"]
