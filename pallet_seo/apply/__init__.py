"""Apply generated snapshots to stored category pages."""
