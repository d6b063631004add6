"""Application layer: workflow orchestrators and their result DTOs."""
