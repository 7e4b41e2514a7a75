import io

import pandas as pd
import streamlit as st

from mentorium.allocation import AllocationEngine
from mentorium.analysis import StatsCalculator, MetricsCalculator
from mentorium.config import DEFAULT_NUM_MENTORS, DEMO_STUDENT_COUNT, TEMPLATE_FILE
from mentorium.demo import generate_demo_students
from mentorium.exceptions import MentoriumError
from mentorium.io import DataLoader, ResultSaver, ReportGenerator
from mentorium.io.loader import ROSTER_EXTENSIONS
from mentorium.io.saver import build_roster_frame, build_summary_frame
from mentorium.utils import clamp_mentor_count, is_finite_number

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# ---- CONFIG ----
st.set_page_config(
    page_title="Mentorium",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded"
)

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)


# ---- STATE ----
def init_state():
    """Seed session state on first run"""
    defaults = {
        "mode": "Demo",
        "students": generate_demo_students(DEMO_STUDENT_COUNT),
        "errors": [],
        "result": None,
        "file_name": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_roster():
    """Start over for the selected mode"""
    if st.session_state.mode == "Demo":
        st.session_state.students = generate_demo_students(DEMO_STUDENT_COUNT)
    else:
        st.session_state.students = []
    st.session_state.errors = []
    st.session_state.result = None
    st.session_state.file_name = None


def handle_upload(uploaded):
    """Parse an uploaded roster into session state"""
    st.session_state.result = None
    st.session_state.file_name = uploaded.name
    try:
        parsed = DataLoader.load_students(io.BytesIO(uploaded.getvalue()), filename=uploaded.name)
    except MentoriumError as e:
        st.session_state.students = []
        st.session_state.errors = [str(e)]
        return
    st.session_state.students = parsed.students
    st.session_state.errors = parsed.errors


def apply_edits(edited: pd.DataFrame):
    """Replace edited scores, clamped into [0, 100]"""
    students = st.session_state.students
    updated = []
    for student, cwa in zip(students, edited["CWA"].tolist()):
        if pd.isna(cwa) and not is_finite_number(student.cwa):
            pass
        elif cwa != student.cwa:
            student = student.with_cwa(pd.to_numeric(cwa, errors="coerce"))
        updated.append(student)
    if updated != students:
        st.session_state.students = updated
        st.session_state.result = None


def download_bytes(writer, *args) -> bytes:
    buffer = io.BytesIO()
    writer(*args, buffer)
    return buffer.getvalue()


# ---- MAIN APP ----
init_state()

st.markdown('<div class="main-header">🎓 Mentorium</div>', unsafe_allow_html=True)
st.markdown('<div class="sub-header">Bidirectional Score-Based Round Robin</div>', unsafe_allow_html=True)

# ============ SIDEBAR ============
st.sidebar.title("📋 Control Panel")

mode = st.sidebar.radio("Mode", ["Demo", "Upload"], key="mode", on_change=reset_roster)

students = st.session_state.students
num_mentors = st.sidebar.number_input(
    "Number of mentors",
    min_value=1,
    max_value=max(len(students), 1) if students else None,
    value=clamp_mentor_count(DEFAULT_NUM_MENTORS, len(students)),
    step=1,
    help="Kept between 1 and the number of students"
)
num_mentors = clamp_mentor_count(num_mentors, len(students))

st.sidebar.download_button(
    "⬇️ Download template",
    data=download_bytes(ResultSaver.write_template),
    file_name=TEMPLATE_FILE,
    mime=XLSX_MIME,
)

if st.sidebar.button("🔄 Reset"):
    reset_roster()
    st.rerun()

st.sidebar.markdown("---")

# ============ ROSTER ============
if mode == "Upload":
    uploaded = st.file_uploader(
        "Upload roster (STUDENTID, INDEXNO, NAME, CWA)",
        type=[ext.lstrip(".") for ext in ROSTER_EXTENSIONS],
    )
    if uploaded is not None and uploaded.name != st.session_state.file_name:
        handle_upload(uploaded)

errors = st.session_state.errors
if errors:
    with st.expander(f"❌ {len(errors)} validation issue(s)", expanded=True):
        for error in errors:
            st.error(error)

students = st.session_state.students
if students:
    st.subheader(f"Roster ({len(students)} students)")
    edited = st.data_editor(
        build_roster_frame(students),
        hide_index=True,
        use_container_width=True,
        disabled=["STUDENTID", "INDEXNO", "NAME"],
        column_config={
            "CWA": st.column_config.NumberColumn("CWA", min_value=0.0, max_value=100.0, step=0.01),
        },
        key=f"roster_{mode}_{st.session_state.file_name}",
    )
    apply_edits(edited)

force = False
if errors:
    force = st.checkbox("Allocate anyway (rows without a valid CWA are skipped)")

can_run = bool(st.session_state.students) and (not errors or force)
if st.button("▶️ Run algorithm", type="primary", disabled=not can_run):
    try:
        st.session_state.result = AllocationEngine.allocate(st.session_state.students, num_mentors)
    except ValueError as e:
        st.error(f"Invalid configuration. Please check inputs. ({e})")

# ============ RESULTS ============
result = st.session_state.result
if result is None:
    st.stop()

stats = StatsCalculator.calculate(result.assignments)
metrics = MetricsCalculator.calculate(result, stats)

st.markdown("---")
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Mentors", metrics["num_mentors"])
with col2:
    st.metric("Students Assigned", metrics["total_assigned"])
with col3:
    st.metric("Passes", metrics["passes"])
with col4:
    st.metric("Average Spread", metrics["average_spread"])

st.caption("Passes: " + " → ".join(result.passes))

with st.expander("📊 Summary", expanded=True):
    st.dataframe(build_summary_frame(stats), hide_index=True, use_container_width=True)

columns = st.columns(2)
for assignment, s in zip(result.assignments, stats):
    with columns[assignment.mentor_index % 2]:
        st.markdown(f"**Mentor {assignment.display_number}**")
        st.caption(f"{s.count} mentees • avg {s.average_cwa} • hi {s.highest_cwa} • lo {s.lowest_cwa}")
        st.dataframe(build_roster_frame(assignment.students), hide_index=True, use_container_width=True)

st.markdown("---")
dl1, dl2 = st.columns(2)
with dl1:
    st.download_button(
        "⬇️ Download workbook",
        data=download_bytes(ResultSaver.export_workbook, result),
        file_name="mentor_allocation.xlsx",
        mime=XLSX_MIME,
    )
with dl2:
    st.download_button(
        "⬇️ Download PDF report",
        data=download_bytes(ReportGenerator().generate, result),
        file_name="mentor_allocation.pdf",
        mime="application/pdf",
    )
