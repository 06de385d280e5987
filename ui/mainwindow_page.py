import streamlit as st

from core.config import MAX_LENGTH, MIN_LENGTH, STRENGTH_TIERS


def render():
    st.markdown(
        """
        <style>
          .sp-title{
            font-size: 44px;
            font-weight: 700;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
          }
          @media (max-width: 768px){
            .sp-title{ font-size: 32px; }
          }
          @media (prefers-color-scheme: dark){
            .sp-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="sp-title">SecurePass 🔐</div>', unsafe_allow_html=True)

    st.markdown(
        f"Generate strong passwords locally ({MIN_LENGTH}–{MAX_LENGTH} characters). "
        "Nothing is stored or sent anywhere; history lives only in this browser session."
    )

    # Bảng mức độ theo entropy
    rows = "".join(
        f"<tr><td style='padding:4px 8px;color:{color};font-weight:600;'>{label}</td>"
        f"<td style='padding:4px 8px;'>≥ {lower} bits</td></tr>"
        for lower, _, label, color in STRENGTH_TIERS
    )
    st.markdown(
        f"<table style='border-collapse:collapse;'>{rows}</table>",
        unsafe_allow_html=True,
    )

    st.info("Chọn mục ở thanh **sidebar** để bắt đầu.")
