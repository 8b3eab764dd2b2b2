"""
gilded_rose.inventory: Day-zero inventory loading.

Modules:
  seed_loader: Reads a JSON inventory file into ``Item`` models.
"""
