from .analyzer import analyze_resume, detect_sections, has_quantified_achievement, keyword_density
from .heuristic import SIGNAL_NAMES, detect_signals, score_resume
from .llm import score_with_llm
