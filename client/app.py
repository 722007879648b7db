import os
import logging
import datetime
import streamlit as st
from client.form_controller import WorkoutFormController, SubmissionError
from client.form_model import INTENSITIES, WorkoutValidationError, format_workout_date

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

st.set_page_config(page_title="Fitness Tracker", page_icon="💪", layout="centered")

# one controller per browser session; a reload starts a fresh history
if "controller" not in st.session_state:
    st.session_state.controller = WorkoutFormController()
controller: WorkoutFormController = st.session_state.controller

st.title("Fitness Tracker")

with st.form("workout_form"):
    workout_date = st.date_input("Workout Date", value=datetime.date.today())
    date_error = st.empty()
    exercise = st.text_input("Exercise", placeholder="e.g., Running, Swimming, Cycling")
    exercise_error = st.empty()
    duration = st.number_input("Duration (minutes)", min_value=0, value=None, step=1, placeholder="30")
    duration_error = st.empty()
    intensity = st.selectbox("Intensity", INTENSITIES, format_func=str.capitalize)
    intensity_error = st.empty()
    submitted = st.form_submit_button(
        "Calculating..." if controller.busy else "Calculate Calories",
        disabled=controller.busy,
        use_container_width=True,
    )

error_slots = {
    "date": date_error,
    "exercise": exercise_error,
    "duration": duration_error,
    "intensity": intensity_error,
}

if submitted:
    raw = {"exercise": exercise, "duration": duration, "intensity": intensity, "date": workout_date}
    try:
        workout = controller.validate(raw)
    except WorkoutValidationError as e:
        for field, message in e.errors.items():
            if field in error_slots:
                error_slots[field].error(message)
    else:
        with st.spinner("Calculating..."):
            try:
                controller.submit(workout)
            except SubmissionError:
                # the result panel keeps its last value; resubmitting is up to the user
                st.error("Could not calculate calories. Please try again.")

if controller.calories is not None and controller.last_workout is not None:
    with st.container(border=True):
        st.markdown("#### Great workout! 💪")
        st.markdown(f"**{controller.calories} calories**")
        st.caption(f"burned during {controller.last_workout.exercise} session")

if controller.total_workouts > 0:
    st.subheader("Workout History")
    col1, col2 = st.columns(2)
    col1.metric("Total Workouts", controller.total_workouts)
    col2.metric("Total Calories Burned", controller.total_calories)

    for record in controller.history:
        with st.container(border=True):
            st.markdown(f"**{format_workout_date(record.date)}**")
            st.write(f"{record.exercise} - {record.duration} minutes ({record.intensity} intensity)")
            st.markdown(f":green[{record.calories} calories burned]")
