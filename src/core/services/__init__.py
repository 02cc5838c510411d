"""Services: orchestration of the build stages."""
