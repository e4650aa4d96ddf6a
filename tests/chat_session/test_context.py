# tests/chat_session/test_context.py
from datetime import datetime, timedelta

import pytest

from hustlesynth.chat_session.context import ContextWindowBuilder, build_context_window
from hustlesynth.chat_session.domains import Message, MessageRole


def _conversation(pairs: int):
    start = datetime(2024, 1, 1)
    messages = []
    for i in range(pairs):
        messages.append(Message(MessageRole.USER, f"question {i}", start + timedelta(seconds=2 * i)))
        messages.append(Message(MessageRole.ASSISTANT, f"answer {i}", start + timedelta(seconds=2 * i + 1)))
    return messages


class TestContextWindowBuilder:
    """ContextWindowBuilder 테스트"""

    def test_short_history_is_included_whole(self):
        # given
        builder = ContextWindowBuilder(window_size=10, system_prompt="sys")
        history = _conversation(2)

        # when
        window = builder.build(history)

        # then
        assert window[0] == builder.system_message
        assert window[1:] == history

    def test_long_history_keeps_most_recent(self):
        """25쌍의 대화, N=10이면 시스템 메시지 + 최근 10개"""
        # given
        builder = ContextWindowBuilder(window_size=10, system_prompt="sys")
        history = _conversation(25)

        # when
        window = builder.build(history)

        # then
        assert len(window) == 11
        assert window[0].role is MessageRole.SYSTEM
        assert window[0].content == "sys"
        assert window[1:] == history[-10:]
        assert window[1].content == "question 20"
        assert window[-1].content == "answer 24"

    @pytest.mark.parametrize("size", [0, 1, 3, 10, 50])
    def test_window_length_bounded(self, size):
        # given
        builder = ContextWindowBuilder(window_size=size, system_prompt="sys")

        # when
        window = builder.build(_conversation(20))

        # then
        assert len(window) <= size + 1
        assert window[0].role is MessageRole.SYSTEM
        assert all(m.role is not MessageRole.SYSTEM for m in window[1:])

    def test_zero_window_sends_only_system_message(self):
        # given
        builder = ContextWindowBuilder(window_size=0, system_prompt="sys")

        # when
        window = builder.build(_conversation(3))

        # then
        assert window == [builder.system_message]

    def test_empty_history(self):
        # given
        builder = ContextWindowBuilder(window_size=5, system_prompt="sys")

        # when & then
        assert builder.build([]) == [builder.system_message]

    def test_deterministic_and_input_untouched(self):
        # given
        builder = ContextWindowBuilder(window_size=4, system_prompt="sys")
        history = tuple(_conversation(5))

        # when
        first = builder.build(history)
        second = builder.build(history)

        # then
        assert first == second
        assert history == tuple(_conversation(5))

    def test_messages_are_not_split(self):
        # given
        long_text = "x" * 10_000
        history = [Message(MessageRole.USER, long_text, datetime.now())]
        builder = ContextWindowBuilder(window_size=1, system_prompt="sys")

        # when
        window = builder.build(history)

        # then
        assert window[1].content == long_text

    def test_negative_window_rejected(self):
        # when & then
        with pytest.raises(ValueError):
            ContextWindowBuilder(window_size=-1, system_prompt="sys")
        with pytest.raises(ValueError):
            build_context_window([], -1, Message(MessageRole.SYSTEM, "sys", datetime.now()))
