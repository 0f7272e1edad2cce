import os

from menuboard.core.config import settings

# 📁 Upload paths
UPLOAD_PATHS = {
    "menu_item_images": os.path.join(settings.upload_dir, "items"),
}

ALLOWED_IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".webp"}

DEFAULT_SECTIONS = ["Fast Food", "Plats Gourmands", "Desserts", "Boissons"]

UNTITLED_SECTION = "Untitled Section"

ADMIN_ROLE = "admin"

# Ensure all folders exist
for path in UPLOAD_PATHS.values():
    os.makedirs(path, exist_ok=True)
