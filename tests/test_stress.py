"""Unit tests for the stress scorer.

Tests the StressScorer service for:
- Baseline and factor contributions
- Keyword bonus/relief matching
- Length bonus and clamping
- Category thresholds
- Tip and guidance selection
- Feedback payloads
"""

import pytest

from stressmate.config.models import KeywordRule
from stressmate.domain.models import StressCategory
from stressmate.stress import StressScorer, build_feedback, guidance_for, tips_for


@pytest.fixture
def scorer(app_config):
    """Scorer with the packaged rule tables."""
    return StressScorer(app_config.stress)


class TestComputeStress:
    """Tests for StressScorer.compute_stress()."""

    def test_empty_input_returns_baseline(self, scorer):
        """Empty text and selections give the baseline, which is MEDIUM."""
        result = scorer.compute_stress("", [], [])

        assert result.score == 50
        assert result.category == StressCategory.MEDIUM
        assert result.label == "보통"

    def test_default_arguments(self, scorer):
        """All arguments are optional."""
        assert scorer.compute_stress().score == 50
        assert scorer.compute_stress(None, None, None).score == 50

    def test_whitespace_only_text(self, scorer):
        """Whitespace does not count towards the length bonus."""
        assert scorer.compute_stress("   \n\t  ").score == 50

    def test_conflict_factor_and_keyword(self, scorer):
        """갈등 as factor (+25) and keyword (+10) gives 85, VERY_HIGH."""
        result = scorer.compute_stress("팀장님과 갈등이 있었다", ["갈등"], [])

        assert result.score == 85
        assert result.category == StressCategory.VERY_HIGH
        assert result.message == "쉬어야 해요. 지금은 속도를 늦추고 회복에 집중하세요."

    def test_positive_factors_lower_score(self, scorer):
        """운동함 (-18) and 명상/호흡 (-15) give 17, LOW."""
        result = scorer.compute_stress("", [], ["운동함", "명상/호흡"])

        assert result.score == 17
        assert result.category == StressCategory.LOW

    def test_unknown_factor_keys_ignored(self, scorer):
        """Keys outside the catalogs contribute nothing."""
        result = scorer.compute_stress("", ["없는 요인"], ["운동함함"])

        assert result.score == 50

    def test_factor_in_wrong_list_ignored(self, scorer):
        """A negative key passed as positive is not in the positive catalog."""
        result = scorer.compute_stress("", [], ["야근"])

        assert result.score == 50

    def test_bonus_and_relief_both_apply(self, scorer):
        """피곤 (+6) and 운동 (-8) in the same text both count."""
        result = scorer.compute_stress("피곤했지만 운동했다", [], [])

        assert result.score == 48

    def test_keywords_not_deduplicated_across_rules(self, scorer):
        """지옥철 and 회의 each add their own delta."""
        result = scorer.compute_stress("지옥철 타고 회의 갔다", [], [])

        assert result.score == 50 + 5 + 6

    def test_repeated_keyword_counts_once_per_rule(self, scorer):
        """A keyword appearing twice in the text still applies once."""
        result = scorer.compute_stress("마감 마감 마감", [], [])

        assert result.score == 58

    def test_keyword_match_is_case_insensitive(self, app_config):
        """Latin keywords match regardless of case."""
        rules = app_config.stress.model_copy(
            update={"bonus_keywords": [KeywordRule(keyword="Deadline", delta=8)]}
        )
        scorer = StressScorer(rules)

        assert scorer.compute_stress("DEADLINE tomorrow").score == 58
        assert scorer.compute_stress("deadline tomorrow").score == 58

    @pytest.mark.parametrize(
        "length, bonus",
        [(79, 0), (80, 1), (159, 1), (160, 2), (799, 9), (800, 10), (5000, 10)],
    )
    def test_length_bonus(self, scorer, length, bonus):
        """One point per 80 characters, capped at 10."""
        assert scorer.length_bonus("가" * length) == bonus
        assert scorer.compute_stress("가" * length).score == 50 + bonus

    def test_length_bonus_uses_trimmed_text(self, scorer):
        """Surrounding whitespace is trimmed before measuring."""
        assert scorer.length_bonus("  " + "가" * 80 + "  ") == 1
        assert scorer.length_bonus(" " * 200) == 0

    def test_score_clamped_to_100(self, scorer):
        """Every negative factor plus every bonus keyword caps at 100."""
        result = scorer.compute_stress(
            "갈등 마감 피곤 회의 지옥철",
            scorer.negative_keys,
            [],
        )

        assert result.score == 100
        assert result.category == StressCategory.VERY_HIGH

    def test_score_clamped_to_0(self, scorer):
        """Every positive factor plus every relief keyword floors at 0."""
        result = scorer.compute_stress("운동 산책 명상 휴식 칭찬", [], scorer.positive_keys)

        assert result.score == 0
        assert result.category == StressCategory.LOW

    def test_deterministic(self, scorer):
        """Identical arguments give identical results."""
        args = ("야근하고 마감에 쫓겼다. 산책은 못 했다.", ["야근", "수면 부족"], ["집중 타임"])

        assert scorer.compute_stress(*args) == scorer.compute_stress(*args)

    def test_selection_order_irrelevant(self, scorer):
        """Selections are sets; order and duplicates do not matter."""
        first = scorer.compute_stress("", ["야근", "갈등"], [])
        second = scorer.compute_stress("", ["갈등", "야근", "갈등"], [])

        assert first == second

    @pytest.mark.parametrize("factor", ["야근", "갈등", "회의 많음", "통근 지옥", "수면 부족"])
    def test_adding_negative_never_decreases(self, scorer, factor):
        """Adding a negative factor keeps the score equal or higher."""
        base = scorer.compute_stress("피곤", ["수면 부족"], ["운동함"])
        more = scorer.compute_stress("피곤", ["수면 부족", factor], ["운동함"])

        assert more.score >= base.score

    @pytest.mark.parametrize("factor", ["운동함", "산책/햇빛", "명상/호흡", "집중 타임"])
    def test_adding_positive_never_increases(self, scorer, factor):
        """Adding a positive factor keeps the score equal or lower."""
        base = scorer.compute_stress("마감", ["야근"], ["집중 타임"])
        more = scorer.compute_stress("마감", ["야근"], ["집중 타임", factor])

        assert more.score <= base.score


class TestClassify:
    """Tests for category thresholds."""

    @pytest.mark.parametrize(
        "score, category",
        [
            (0, StressCategory.LOW),
            (39, StressCategory.LOW),
            (40, StressCategory.MEDIUM),
            (59, StressCategory.MEDIUM),
            (60, StressCategory.HIGH),
            (74, StressCategory.HIGH),
            (75, StressCategory.VERY_HIGH),
            (100, StressCategory.VERY_HIGH),
        ],
    )
    def test_thresholds_closed_on_lower_end(self, scorer, score, category):
        """Each threshold belongs to the higher category."""
        assert scorer.classify(score).category == category

    def test_each_category_has_message(self, scorer):
        """Labels and messages come from the rule tables."""
        assert scorer.classify(10).label == "낮음"
        assert scorer.classify(65).message == "피로 누적 신호! 작은 휴식과 완급 조절이 필요합니다."


class TestTipsAndGuidance:
    """Tests for tips_for() and guidance_for()."""

    @pytest.mark.parametrize(
        "score, first_tip",
        [
            (100, "5분간 호흡 연습(4-4-6 호흡)"),
            (75, "5분간 호흡 연습(4-4-6 호흡)"),
            (74, "목/어깨 스트레칭 2분"),
            (60, "목/어깨 스트레칭 2분"),
            (59, "현재 페이스 유지하기"),
            (40, "현재 페이스 유지하기"),
            (0, "현재 페이스 유지하기"),
        ],
    )
    def test_tip_tiers(self, scorer, score, first_tip):
        """>=75 high, 60..74 medium, below 60 low."""
        assert scorer.tips_for(score)[0] == first_tip

    def test_tips_without_score(self, app_config):
        """No result yet gives the low tips."""
        assert tips_for(None, app_config.stress.tips) == ["현재 페이스 유지하기", "짧은 감사 일기 쓰기"]

    def test_tips_are_copies(self, scorer):
        """Mutating a returned list does not affect later calls."""
        tips = scorer.tips_for(80)
        tips.append("extra")

        assert "extra" not in scorer.tips_for(80)

    def test_tips_default_rules(self):
        """Module-level helper falls back to the packaged rules."""
        assert len(tips_for(90)) == 4

    def test_immediate_guidance(self, scorer):
        """Two-tier guidance on the result card."""
        assert scorer.guidance_for(60) == scorer.rules.guidance.immediate.rest
        assert scorer.guidance_for(59) == scorer.rules.guidance.immediate.keep_pace

    def test_feedback_guidance(self, app_config):
        """The feedback screen uses its own wording."""
        guidance = app_config.stress.guidance

        assert guidance_for(75, guidance, view="feedback") == guidance.feedback.rest
        assert guidance_for(10, guidance, view="feedback") == guidance.feedback.keep_pace
        assert guidance.feedback.rest != guidance.immediate.rest

    def test_unknown_view_rejected(self, scorer):
        with pytest.raises(ValueError, match="Unknown guidance view"):
            scorer.guidance_for(50, view="sidebar")


class TestBuildFeedback:
    """Tests for the feedback screen payload."""

    def test_without_result(self):
        """Before any computation the payload asks the user to compute first."""
        payload = build_feedback(None)

        assert payload["has_result"] is False
        assert payload["title"] == "먼저 기록 화면에서 지수를 계산해 주세요."
        assert payload["tips"] == ["현재 페이스 유지하기", "짧은 감사 일기 쓰기"]
        assert "score" not in payload

    def test_with_result(self, scorer):
        """With a result the payload carries score, label, guidance and tips."""
        result = scorer.compute_stress("마감 때문에 피곤", ["야근"], [])
        payload = build_feedback(result)

        assert result.score == 84
        assert payload["has_result"] is True
        assert payload["score"] == 84
        assert payload["category"] == "very_high"
        assert payload["label"] == "매우 높음"
        assert payload["guidance"] == scorer.rules.guidance.feedback.rest
        assert payload["tips"] == scorer.tips_for(84)

    def test_payload_matches_immediate_tips(self, scorer):
        """The feedback view and result card show the same tips."""
        result = scorer.compute_stress("", ["회의 많음"], [])

        assert build_feedback(result)["tips"] == scorer.tips_for(result.score)
