# hustlesynth/__init__.py
"""HustleSynth 채팅 프록시 - 세션 관리와 업스트림 LLM 호출"""

__version__ = "1.0.0"
