from negocia.services.analysis_service import AnalysisRelay
from negocia.services.csv_summarizer import CsvSummary, summarize_csv
from negocia.services.file_reader import read_file_text
from negocia.services.prompt_builder import ChatPrompt, build_prompt

__all__ = [
    "AnalysisRelay",
    "ChatPrompt",
    "CsvSummary",
    "build_prompt",
    "read_file_text",
    "summarize_csv",
]
