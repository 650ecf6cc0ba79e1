"""Streamlit UI for scanning business cards."""

import os

import streamlit as st
from dotenv import load_dotenv

from cardreader.config import get_db_path
from cardreader.ocr import VisionOCRClient
from cardreader.pipeline import CardPipeline
from cardreader.storage import CardRepository
from cardreader.utils import setup_logger

# Load environment variables
load_dotenv()
setup_logger(debug_mode=os.getenv("CARDREADER_DEBUG", "false").lower() == "true")

st.set_page_config(
    page_title="Business Card Reader",
    page_icon="📇",
    layout="wide"
)

st.title("📇 Business Card Reader")
st.markdown("""
Extract contact details from a photo of a business card using:
- **Google Cloud Vision API** for OCR
- **Rule-based extraction** of name, email, phone and company
""")


@st.cache_resource
def get_pipeline() -> CardPipeline:
    """Build the pipeline once per server process."""
    credentials_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    return CardPipeline(
        ocr_client=VisionOCRClient(credentials_path=credentials_path),
        repository=CardRepository(get_db_path()),
    )


try:
    pipeline = get_pipeline()
except Exception as e:
    st.error(f"Pipeline initialization error: {e}")
    st.stop()

st.divider()

col1, col2 = st.columns([1, 1])

with col1:
    st.header("📤 Upload Card")

    uploaded_file = st.file_uploader(
        "Choose an image file",
        type=['png', 'jpg', 'jpeg', 'bmp', 'tiff'],
        help="PNG, JPG, JPEG, BMP or TIFF, up to 5MB"
    )

    process_button = st.button(
        "🚀 Process Card",
        type="primary",
        use_container_width=True,
        disabled=uploaded_file is None
    )

    if uploaded_file is not None:
        st.image(uploaded_file, caption="Uploaded Card", use_container_width=True)

with col2:
    st.header("📊 Result")

    if process_button and uploaded_file is not None:
        with st.spinner("Reading card..."):
            result = pipeline.process_card(uploaded_file.name, uploaded_file.getvalue())

        if result.success:
            st.session_state.last_card = result.data
            st.success("✅ Business card processed successfully!")
        else:
            st.session_state.pop('last_card', None)
            st.error(result.error or "Failed to process business card.")

    card = st.session_state.get('last_card')
    if card is not None:
        for label, value in [
            ("Name", card.name),
            ("Email", card.email),
            ("Phone", card.phone),
            ("Company", card.company),
        ]:
            st.text_input(label, value=value or "", disabled=True)

st.divider()
st.header("🗂️ All Cards")

try:
    cards = pipeline.get_all()
except Exception as e:
    st.error(f"Could not load stored cards: {e}")
    st.stop()

if cards:
    st.dataframe(
        [
            {
                "Name": c.name,
                "Email": c.email,
                "Phone": c.phone,
                "Company": c.company,
                "Created": c.created_at.strftime("%Y-%m-%d %H:%M"),
            }
            for c in cards
        ],
        use_container_width=True
    )
else:
    st.info("No cards stored yet.")
