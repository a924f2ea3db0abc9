"""Serverless relay between browser clients and the Gemini API."""
