"""Profile stage: deterministic dataset digests for the text-generation collaborator."""

from .summarize import generate_data_summary, profile_dataset, render_summary_text

__all__ = ["generate_data_summary", "profile_dataset", "render_summary_text"]
