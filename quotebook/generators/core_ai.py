# --- IMPORTS FOR GOOGLE ---
from google import genai
from google.genai import types

# --- IMPORTS FOR OPENAI ---
from openai import OpenAI

from config import (
    AI_PROVIDER,
    GOOGLE_API_KEY,
    GOOGLE_MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_MODEL_NAME,
    TEMPERATURE,
)

# Initialize Clients
google_client = None
openai_client = None

if GOOGLE_API_KEY:
    google_client = genai.Client(api_key=GOOGLE_API_KEY)

if OPENAI_API_KEY:
    openai_client = OpenAI(api_key=OPENAI_API_KEY)


def provider_has_credentials(provider: str = None) -> bool:
    """True if an API key is configured for the provider."""
    provider = (provider or AI_PROVIDER).lower()
    if provider == "openai":
        return bool(OPENAI_API_KEY)
    return bool(GOOGLE_API_KEY)


def required_key_name(provider: str = None) -> str:
    provider = (provider or AI_PROVIDER).lower()
    return "OPENAI_API_KEY" if provider == "openai" else "GOOGLE_API_KEY"


# ==========================================
# IMPLEMENTATION: GOOGLE GEMINI
# ==========================================
def call_gemini_model(prompt: str, model: str = None) -> str:
    """
    Call Gemini model and return full response (non-streaming).

    Args:
        prompt: The prompt to send
        model: Model name (defaults to GOOGLE_MODEL_NAME)

    Returns:
        The model's response text
    """
    if not google_client:
        raise ValueError("GOOGLE_API_KEY is missing")

    model = model or GOOGLE_MODEL_NAME
    print(f"--- [DEBUG] Gemini call: {model} ---")

    try:
        contents = [types.Content(role='user', parts=[types.Part.from_text(text=prompt)])]
        config = types.GenerateContentConfig(temperature=TEMPERATURE)

        response = google_client.models.generate_content(
            model=model,
            contents=contents,
            config=config
        )

        # Extract text from response
        if response.candidates and response.candidates[0].content:
            parts = response.candidates[0].content.parts or []
            return ''.join(p.text for p in parts if p.text and not getattr(p, 'thought', False))

        return ""

    except Exception as e:
        print(f"!!! GEMINI API ERROR ({model}): {str(e)}")
        raise


# ==========================================
# IMPLEMENTATION: OPENAI
# ==========================================
def call_openai_model(prompt: str, model: str = None) -> str:
    """
    Call an OpenAI chat model and return the message content.
    """
    if not openai_client:
        raise ValueError("OPENAI_API_KEY is missing")

    model = model or OPENAI_MODEL_NAME
    print(f"--- [DEBUG] OpenAI call: {model} ---")

    try:
        response = openai_client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=TEMPERATURE,
        )
        return response.choices[0].message.content or ""

    except Exception as e:
        print(f"!!! OPENAI API ERROR ({model}): {str(e)}")
        raise


# ==========================================
# MAIN ROUTER (Public Function)
# ==========================================
def call_model(prompt: str, provider: str = None) -> str:
    """Send prompt to the configured provider (AI_PROVIDER=google|openai)."""
    provider = (provider or AI_PROVIDER).lower()
    if provider == "openai":
        return call_openai_model(prompt)
    return call_gemini_model(prompt)
