# app.py
from pathlib import Path
import sys
import importlib
import streamlit as st
from loguru import logger

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.logging_utils import configure_logging  # noqa: E402

configure_logging()

# ==== Streamlit ====
st.set_page_config(
    page_title="SecurePass",
    page_icon="🔐",
    layout="wide",
)

# ==== Import các trang sau khi đã config ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "password_page":   "🔐 Password Generator",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' thiếu hàm render().")
    except ImportError as e:
        logger.exception("Cannot import page ui.{}", mod_name)
        errors.append(f"Lỗi import 'ui.{mod_name}': {e}")

# Nếu có lỗi, hiển thị nhưng vẫn cho chạy các trang còn lại
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar điều hướng ====
choice = st.sidebar.radio(" ", list(PAGES.keys()), index=len(PAGES) - 1)
PAGES[choice]()
