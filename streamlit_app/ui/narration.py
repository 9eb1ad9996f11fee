"""
Read-aloud support for the recipe details page.

Uses the browser's Web Speech API (speechSynthesis) through an invisible HTML
component. Each call cancels whatever is currently being spoken, then speaks
the new text.
"""

import json

import streamlit.components.v1 as components

DEFAULT_LANGUAGE = "en-US"


def speak(text: str, lang: str = DEFAULT_LANGUAGE) -> None:
    """
    Speak text in the user's browser.

    Args:
        text: Text to read aloud; nothing happens when empty
        lang: BCP 47 language tag for the voice
    """
    if not text:
        return
    script = f"""
    <script>
        const synth = window.parent.speechSynthesis || window.speechSynthesis;
        if (synth) {{
            synth.cancel();
            const utterance = new SpeechSynthesisUtterance({_js_string(text)});
            utterance.lang = {_js_string(lang)};
            synth.speak(utterance);
        }}
    </script>
    """
    components.html(script, height=0)


def _js_string(value: str) -> str:
    """JSON-encode a string for inline use in a <script> block."""
    return json.dumps(value).replace("</", "<\\/")
