"""
AI Provider Step

Configure the AI provider used for commit and merge assistance.
"""

from typing import List

from rich.console import RenderableType
from rich.text import Text

from gitmind.wizard.steps.base import CONTINUE, FormScreen
from gitmind.wizard.ui import render_help
from gitmind.wizard.validators import parse_max_diff_size, validate_api_key
from gitmind.wizard.widgets import Button, Checkbox, Dropdown, RadioGroup, TextField

PROVIDER = "provider"
API_KEY = "api_key"
TIER = "tier"
DEFAULT_MODEL = "default_model"
FALLBACK_MODEL = "fallback_model"
MAX_DIFF_SIZE = "max_diff_size"
INCLUDE_CONTEXT = "include_context"

PROVIDERS = ["cerebras"]
MODELS = ["llama-3.3-70b", "llama3.1-8b"]
TIERS = ["Free", "Pro"]

API_KEY_URL = "https://cloud.cerebras.ai/"


def _index_of(options: List[str], value: str, default: int = 0) -> int:
    return options.index(value) if value in options else default


class AIScreen(FormScreen):
    """AI provider settings.

    Continue is refused while the API key is empty. The resulting error is
    cleared by the next edit of the API key and by nothing else.
    """

    title = "AI Provider Configuration"
    description = "Configure your AI provider for intelligent commit and merge assistance."
    shortcuts = [("Tab/↑↓", "Navigate"), ("Space/←→", "Select"), ("Esc", "Back")]

    def __init__(self, wizard):
        super().__init__(wizard)
        ai = self.config.ai

        max_diff = str(ai.max_diff_size) if ai.max_diff_size and ai.max_diff_size > 0 else "100000"

        self.widgets = {
            PROVIDER: Dropdown("AI Provider", PROVIDERS, _index_of(PROVIDERS, ai.provider)),
            API_KEY: TextField("API Key", "csk-...", value=ai.api_key, password=True),
            TIER: RadioGroup("API Tier", TIERS, 1 if ai.api_tier == "pro" else 0),
            DEFAULT_MODEL: Dropdown("Default Model", MODELS, _index_of(MODELS, ai.default_model)),
            FALLBACK_MODEL: Dropdown("Fallback Model", MODELS, _index_of(MODELS, ai.fallback_model, 1)),
            MAX_DIFF_SIZE: TextField("Max Diff Size (bytes)", "100000", value=max_diff),
            INCLUDE_CONTEXT: Checkbox("Include branch context in AI analysis", ai.include_context),
            CONTINUE: Button("Continue"),
        }

    def on_edit(self, field: str):
        if field == API_KEY:
            self.error = ""

    def submit(self):
        if not self.widgets[API_KEY].value:
            self.error = "API key is required"
            return
        self.save_to_config()
        self.wants_continue = True

    def save_to_config(self):
        ai = self.config.ai
        w = self.widgets
        ai.provider = w[PROVIDER].get_selected()
        ai.api_key = w[API_KEY].value
        ai.api_tier = w[TIER].get_selected().lower()
        ai.default_model = w[DEFAULT_MODEL].get_selected()
        ai.fallback_model = w[FALLBACK_MODEL].get_selected()
        ai.max_diff_size = parse_max_diff_size(w[MAX_DIFF_SIZE].value)
        ai.include_context = w[INCLUDE_CONTEXT].checked

    def render_body(self) -> List[RenderableType]:
        help_text = {
            PROVIDER: "Currently only Cerebras is supported",
            API_KEY: f"Get your free API key at: {API_KEY_URL}",
            TIER: "Free tier has rate limits; Pro tier has higher limits",
            DEFAULT_MODEL: "llama-3.3-70b is recommended for best results",
            FALLBACK_MODEL: "Used when default model is unavailable",
            MAX_DIFF_SIZE: "Maximum size of diffs sent to AI (larger diffs are truncated)",
            INCLUDE_CONTEXT: "Provide branch name, parent, and commit history to AI for better analysis",
        }

        self.widgets[CONTINUE].active = bool(self.widgets[API_KEY].value)

        body: List[RenderableType] = []
        for field in self.visible_fields():
            body.append(self.render_widget(field))
            if field in help_text:
                body.append(render_help(self.theme, help_text[field]))
            if field == API_KEY and self.widgets[API_KEY].value:
                is_valid, message = validate_api_key(
                    self.widgets[API_KEY].value, self.widgets[PROVIDER].get_selected()
                )
                if not is_valid:
                    body.append(Text(f"  ! {message}", style=self.theme.status_warning))
            body.append(Text(""))
        return body
