"""Streamlit UI layer: data loading, controls and page sections."""
