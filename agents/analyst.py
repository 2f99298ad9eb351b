import concurrent.futures
import logging
from typing import Any, Dict, List, Optional

from agents.base import OpenAIStyleClient
from agents.parser import (
    DEFAULT_ADVICE,
    DEFAULT_FINDINGS,
    parse_advice,
    parse_findings,
    parse_text_response,
)
from agents.prompt_helper import build_prompts, normalize_language
from llm_config import LLMConfig

logger = logging.getLogger(__name__)

TEST_MODE_RECOMMENDATION = {
    "zh": "（测试模式）我建议你慎重对待这个决定，先列出每个选项的利弊再行动。",
    "en": "(UI test mode) I recommend you approach this thoughtfully and list the pros and cons of each option first.",
}


class DecisionAnalyst:
    """
    Runs the three analysis calls for one request:
    - recommendation: free-text expert opinion
    - findings: four-part trait analysis (JSON)
    - advice: four-part advice & outlook (JSON)

    In UI test mode no request is sent and canned outputs are returned.
    """

    def __init__(
        self,
        client: OpenAIStyleClient,
        ui_test_mode: bool = False,
        log: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.ui_test_mode = ui_test_mode
        self.log = log or logger

    def recommend(self, messages: List[Dict[str, str]], language: str = "en") -> str:
        if self.ui_test_mode:
            return TEST_MODE_RECOMMENDATION[normalize_language(language)]
        return parse_text_response(self.client.send(messages), language)

    def analyze_findings(self, messages: List[Dict[str, str]], language: str = "en") -> Dict[str, Any]:
        if self.ui_test_mode:
            return dict(DEFAULT_FINDINGS[normalize_language(language)])
        return parse_findings(self.client.send(messages), language, self.log)

    def advise(self, messages: List[Dict[str, str]], language: str = "en") -> Dict[str, Any]:
        if self.ui_test_mode:
            return dict(DEFAULT_ADVICE[normalize_language(language)])
        return parse_advice(self.client.send(messages), language, self.log)

    def analyze_all(
        self,
        question: str,
        selected_tags: Optional[Dict[str, Any]],
        language: str = "en",
        options: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Issue the three calls concurrently and wait for all of them.

        The first call to fail has its exception re-raised and no partial
        result is returned. Calls already in flight are not cancelled.
        """
        prompts = build_prompts(question, selected_tags, language, options=options)
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=3)
        try:
            futures = {
                "recommendationText": executor.submit(self.recommend, prompts["recommendation"], language),
                "traitFindings": executor.submit(self.analyze_findings, prompts["findings"], language),
                "advice": executor.submit(self.advise, prompts["advice"], language),
            }
            done, _ = concurrent.futures.wait(
                futures.values(), return_when=concurrent.futures.FIRST_EXCEPTION
            )
            for future in done:
                exc = future.exception()
                if exc is not None:
                    raise exc
            return {slot: future.result() for slot, future in futures.items()}
        finally:
            executor.shutdown(wait=False)


def build_analyst(config: LLMConfig, log: Optional[logging.Logger] = None) -> DecisionAnalyst:
    return DecisionAnalyst(OpenAIStyleClient(config), ui_test_mode=config.ui_test_mode, log=log)
