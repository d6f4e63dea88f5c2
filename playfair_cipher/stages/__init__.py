"""The three Playfair stages, run in order: grid → normalize → transform."""
