import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Portfolio preview")

import atexit

import streamlit.components.v1 as components

from config import PORTFOLIO_CONTENT_PATH, content_label
from generator_rule import current_year, portfolio_to_html
from loader import ContentError, find_duplicate_keys, load_portfolio
from temp_server import cleanup_temp_server, serve_html_temporarily

# Register cleanup function to run when Streamlit exits
atexit.register(cleanup_temp_server)


@st.cache_resource
def get_portfolio(path: str):
    """Load the content document once per path; Reload clears the cache."""
    return load_portfolio(path)


if "temp_server_url" not in st.session_state:
    st.session_state.temp_server_url = None

st.title("🗂️ → 🌐 Portfolio preview")
st.markdown("Render the single-page portfolio from its JSON content file")

col_path, col_reload = st.columns([4, 1])
with col_path:
    content_path = st.text_input("Content file", value=str(PORTFOLIO_CONTENT_PATH))
with col_reload:
    st.write("")
    if st.button("🔄 Reload", use_container_width=True):
        get_portfolio.clear()
        st.session_state.temp_server_url = None

try:
    portfolio = get_portfolio(content_path)
except ContentError as e:
    st.error(str(e))
    st.stop()

for section, keys in find_duplicate_keys(portfolio).items():
    st.warning(f"Duplicate {section} entries: {', '.join(keys)}")

title = st.text_input("Page title prefix", value="", help="Leave empty for plain “Portfolio”")
html = portfolio_to_html(portfolio, year=current_year(), inline=True, title=title or None,
                         content_path=content_label(content_path))

col_download, col_serve = st.columns(2)
with col_download:
    st.download_button(
        "⬇️ Download HTML",
        data=html,
        file_name="index.html",
        mime="text/html",
        use_container_width=True,
    )
with col_serve:
    if st.button("🌐 Open preview in browser", use_container_width=True):
        st.session_state.temp_server_url = serve_html_temporarily(html)

if st.session_state.temp_server_url:
    st.success(f"Serving at {st.session_state.temp_server_url}")

st.divider()
components.html(html, height=900, scrolling=True)
