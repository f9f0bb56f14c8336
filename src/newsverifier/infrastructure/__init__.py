"""Infrastructure layer - adapters for the network, HTML and the language model."""
