"""Expert prompt templates rendered with Jinja2."""

from prompt_optimizer.prompting.experts import (
    render_expert_template,
    template_name,
)
from prompt_optimizer.prompting.manager import PromptManager

__all__ = ["PromptManager", "render_expert_template", "template_name"]
