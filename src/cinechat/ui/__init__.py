"""Streamlit UI for CineChat."""
