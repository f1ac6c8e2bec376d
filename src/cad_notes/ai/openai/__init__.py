"""OpenAI integration package."""
