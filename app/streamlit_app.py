# app/streamlit_app.py
import os
import sys

import streamlit as st

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Project modules
from resume_renderer import configure_logging, parser
from resume_renderer.layout_engine.layout_renderer import LAYOUTS
from resume_renderer.normalizer import CONTENT_FIELDS
from resume_renderer.pdf_exporter import available_templates, resume_filename, resume_pdf_bytes

configure_logging()

FIELD_LABELS = {
    "objective": "Objective / Summary",
    "education": "Education",
    "skills": "Skills",
    "languages": "Languages",
    "experience": "Experience",
    "projects": "Projects",
    "certifications": "Certifications",
    "achievements": "Achievements",
    "references_info": "References",
    "additional_info": "Additional Information",
}

# -----------------------------
# Streamlit UI Configuration
# -----------------------------
st.set_page_config(page_title="Resume Generator – Template Preview", layout="centered")

st.title("📄 Resume Generator: Template Preview")
st.markdown("""
Fill in the student profile and resume sections, pick a template and get:
- 🎨 one of eight PDF designs
- 📑 an extracted-text preview of the result
- ⬇️ the PDF with the same file name the portal uses
""")

# Sidebar instructions
st.sidebar.header("⚙️ How to Use")
st.sidebar.write("""
1️⃣ Enter name, email and branch
2️⃣ Fill in any sections (empty ones are skipped)
3️⃣ Choose template → Generate
""")

# -----------------------------
# Step 1: Student Info + Sections
# -----------------------------
with st.form("resume_form"):
    col1, col2, col3 = st.columns(3)
    student_info = {
        "name": col1.text_input("Name", value="Student"),
        "email": col2.text_input("Email"),
        "branch": col3.text_input("Branch"),
    }

    resume_data = {}
    for field in CONTENT_FIELDS:
        resume_data[field] = st.text_area(FIELD_LABELS.get(field, field), height=100)

    template = st.selectbox("Template", available_templates())
    layout = st.radio("Layout", LAYOUTS, horizontal=True)
    submitted = st.form_submit_button("🚀 Generate Resume")

# -----------------------------
# Step 2: Render + Download
# -----------------------------
if submitted:
    with st.spinner("Rendering PDF..."):
        pdf_data = resume_pdf_bytes(resume_data, student_info, template, layout)
    st.session_state["pdf"] = pdf_data
    st.session_state["filename"] = resume_filename(student_info["name"], template)
    st.success("✅ Resume generated!")

if st.session_state.get("pdf"):
    pdf_data = st.session_state["pdf"]
    st.subheader("📑 Text Preview")
    try:
        st.caption(f"{parser.page_count(pdf_data)} page(s)")
        st.text_area("Extracted Text (preview)", parser.extract_pdf_text(pdf_data)[:1500], height=260)
    except Exception as e:
        st.warning(f"⚠️ Preview unavailable: {e}")

    st.download_button("📄 Download Resume (PDF)", data=pdf_data,
                       file_name=st.session_state["filename"], mime="application/pdf")

# -----------------------------
# Footer
# -----------------------------
st.markdown("---")
st.caption("University Portal | Resume Generator | Streamlit + ReportLab")
