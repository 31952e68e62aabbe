"""BioAge Calculator API service."""
