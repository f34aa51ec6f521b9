# petplace/client/wizard.py
from dataclasses import dataclass
from typing import List, Sequence, Tuple

RECOMMENDATION_COUNT = 3

@dataclass(frozen=True)
class WizardQuestion:
    question_id: int
    text: str
    options: Tuple[str, ...]

DEFAULT_QUESTIONS = (
    WizardQuestion(1, "크기는?", ("소형", "중형", "대형")),
    WizardQuestion(2, "성격은?", ("활발", "조용")),
    WizardQuestion(3, "활동 선호?", ("야외", "실내")),
    WizardQuestion(4, "거리 선호?", ("가까움", "중간", "멀리")),
)

class RecommendationWizard:
    """
    고정된 질문을 순서대로 보여주는 추천 마법사.
    어떤 선택지를 고르든 다음 단계로 넘어갈 뿐 답변은 저장하지 않으며,
    마지막 단계에서는 이미 불러온 장소 목록의 앞 3개를 추천으로 보여줍니다.

    select()는 현재 질문의 선택지 중 하나만 받습니다. 선택지에 없는 값이나
    모든 질문에 답한 뒤의 선택은 단계를 넘기지 않고 ValueError를 던집니다.
    """

    def __init__(self, places: Sequence, questions: Sequence[WizardQuestion] = DEFAULT_QUESTIONS):
        self.places = places
        self.questions = tuple(questions)
        self.step = 0

    @property
    def is_finished(self) -> bool:
        return self.step >= len(self.questions)

    @property
    def current_question(self) -> WizardQuestion:
        if self.is_finished:
            raise ValueError("모든 질문에 답했습니다.")
        return self.questions[self.step]

    @property
    def progress_label(self) -> str:
        return f"질문 {self.step + 1} / {len(self.questions)}"

    def select(self, option: str) -> None:
        """선택지와 상관없이 한 단계 진행합니다. 제시되지 않은 선택지는 ValueError."""
        question = self.current_question
        if option not in question.options:
            raise ValueError(f"'{question.text}' 질문에 없는 선택지입니다: {option}")
        self.step += 1

    @property
    def recommendations(self) -> List:
        if not self.is_finished:
            return []
        return list(self.places[:RECOMMENDATION_COUNT])

    def restart(self) -> None:
        self.step = 0
