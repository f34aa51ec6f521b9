# petplace/client/test_wizard.py
import pytest

from petplace.client.wizard import RecommendationWizard, DEFAULT_QUESTIONS


def _answer_all(wizard, pick_last=False):
    while not wizard.is_finished:
        options = wizard.current_question.options
        wizard.select(options[-1] if pick_last else options[0])


def test_each_selection_advances_one_step():
    wizard = RecommendationWizard(places=["a", "b", "c", "d"])
    assert wizard.progress_label == "질문 1 / 4"
    wizard.select("대형")
    assert wizard.step == 1
    assert wizard.current_question.text == "성격은?"
    assert wizard.recommendations == []


@pytest.mark.parametrize("pick_last", [False, True])
def test_answers_do_not_change_recommendations(pick_last):
    wizard = RecommendationWizard(places=["a", "b", "c", "d"])
    _answer_all(wizard, pick_last)

    assert wizard.step == len(DEFAULT_QUESTIONS)
    assert wizard.recommendations == ["a", "b", "c"]


@pytest.mark.parametrize("count", [0, 1, 2, 3, 5])
def test_recommendations_show_at_most_three(count):
    places = [f"place-{i}" for i in range(count)]
    wizard = RecommendationWizard(places=places)
    _answer_all(wizard)
    assert len(wizard.recommendations) == min(3, count)


def test_select_after_finish_or_unknown_option_is_rejected():
    wizard = RecommendationWizard(places=[])
    with pytest.raises(ValueError):
        wizard.select("초대형")
    # 제시되지 않은 선택지는 단계를 넘기지 않음
    assert wizard.step == 0
    _answer_all(wizard)
    with pytest.raises(ValueError):
        wizard.select("소형")


def test_restart_resets_step():
    wizard = RecommendationWizard(places=["a"])
    _answer_all(wizard)
    wizard.restart()
    assert wizard.step == 0
    assert not wizard.is_finished
