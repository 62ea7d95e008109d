import streamlit as st
import time
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from search_benchmark.config import BenchmarkConfig
from search_benchmark.data_loader import generate_dataset
from search_benchmark.evaluation import evaluate
from search_benchmark.report import format_value
from search_benchmark.searches import LinearSearch, BinarySearch

st.set_page_config(page_title="Search Benchmark Dashboard", layout="wide")

st.title("Search Benchmark Dashboard")
st.markdown("Compare linear and binary search on a sorted collection of unique random integers.")

defaults = BenchmarkConfig()

st.sidebar.header("Configuration")

st.sidebar.subheader("Dataset")
dataset_size = st.sidebar.number_input(
    "Dataset Size",
    min_value=1,
    max_value=2000000,
    value=defaults.dataset_size,
    step=10000,
    help="Number of unique values in the sorted collection"
)
num_valid = st.sidebar.number_input(
    "Valid Probes",
    min_value=0,
    max_value=100000,
    value=defaults.num_valid,
    step=1000,
    help="Probes guaranteed to be present in the collection"
)
num_invalid = st.sidebar.number_input(
    "Invalid Probes",
    min_value=0,
    max_value=100000,
    value=defaults.num_invalid,
    step=1000,
    help="Probes guaranteed to be absent from the collection"
)
seed = st.sidebar.number_input("Random Seed", min_value=0, value=defaults.seed, step=1)

st.sidebar.subheader("Searchers")
run_linear = st.sidebar.checkbox("Linear Search", value=True, help="Warning: Very slow for large datasets")
run_binary = st.sidebar.checkbox("Binary Search", value=True)

col1, col2 = st.columns([1, 3])

with col1:
    run_button = st.button("Run Benchmark", type="primary", use_container_width=True)

with col2:
    st.info(f"Configuration: {dataset_size:,} values, {num_valid:,} valid / {num_invalid:,} invalid probes, seed {seed:#x}")

if 'results' not in st.session_state:
    st.session_state.results = None


def run_benchmark_pipeline():
    """Run the complete benchmark pipeline"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    # Step 1: Generate data
    status_text.text("Generating dataset...")
    progress_bar.progress(10)
    try:
        dataset = generate_dataset(int(dataset_size), int(num_valid), int(num_invalid), int(seed))
    except ValueError as e:
        st.error(f"Could not generate dataset: {e}")
        return None

    st.markdown("---")
    st.subheader("Dataset")
    col_stats1, col_stats2, col_stats3, col_stats4 = st.columns(4)
    with col_stats1:
        st.metric("Total Values", f"{len(dataset):,}")
    with col_stats2:
        st.metric("Min Value", f"{dataset.items[0]:,}")
    with col_stats3:
        st.metric("Max Value", f"{dataset.items[-1]:,}")
    with col_stats4:
        st.metric("log2(n)", f"{np.log2(len(dataset)):.2f}")

    progress_bar.progress(20)

    # Step 2: Run searchers
    searchers = []
    if run_linear:
        searchers.append(LinearSearch())
    if run_binary:
        searchers.append(BinarySearch())

    reports = []
    progress_step = 80 / len(searchers)
    current_progress = 20
    for searcher in searchers:
        status_text.text(f"Running {searcher.name} over {num_valid + num_invalid:,} probes...")
        start_time = time.perf_counter()
        reports.append(evaluate(searcher, dataset))
        elapsed_ms = (time.perf_counter() - start_time) * 1e3
        status_text.text(f"{searcher.name} finished in {elapsed_ms:.2f} ms")
        current_progress += progress_step
        progress_bar.progress(int(current_progress))

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")
    return reports, len(dataset)


def results_frame(reports):
    """Compile one table row per searcher"""
    rows = []
    for report in reports:
        combined = report.combined
        rows.append({
            'Method': report.searcher_name,
            'Correct (valid)': report.valid.correct_count,
            'Correct (valid) %': format_value(report.valid.correct_percentage, 1),
            'Correct (invalid)': report.invalid.correct_count,
            'Correct (invalid) %': format_value(report.invalid.correct_percentage, 1),
            'Incorrect': combined.incorrect_count,
            'Incorrect %': format_value(combined.incorrect_percentage, 1),
            'Total Iterations': combined.total_iterations,
            'Avg Iterations': combined.average_iterations,
            'Avg Time (µs)': combined.average_time_us,
        })
    return pd.DataFrame(rows)


# Run benchmark when button is clicked
if run_button:
    if not any([run_linear, run_binary]):
        st.warning("Please select at least one searcher to benchmark!")
    else:
        with st.spinner("Running benchmark..."):
            outcome = run_benchmark_pipeline()
            if outcome is not None:
                st.session_state.results, st.session_state.data_size = outcome

# Display results
if st.session_state.results is not None:
    reports = st.session_state.results
    st.markdown("---")
    st.subheader("Benchmark Results")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Dataset Size", f"{st.session_state.data_size:,} values")
    with col2:
        st.metric("Probes per Searcher", f"{reports[0].combined.total_results:,}")

    st.dataframe(results_frame(reports), use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Performance Comparison")

    tab1, tab2 = st.tabs(["Average Iterations", "Iteration Distribution"])

    with tab1:
        avg_fig = go.Figure()
        avg_fig.add_trace(go.Bar(
            x=[report.searcher_name for report in reports],
            y=[report.combined.average_iterations for report in reports],
            marker=dict(color='steelblue'),
            text=[format_value(report.combined.average_iterations) for report in reports],
            textposition='outside'
        ))
        avg_fig.update_layout(
            title="Average Iterations per Correct Result",
            xaxis_title="Search Method",
            yaxis_title="Iterations",
            yaxis_type="log",
            height=400,
            showlegend=False
        )
        st.plotly_chart(avg_fig, use_container_width=True)

    with tab2:
        colors = {'LinearSearch': 'darkorange', 'BinarySearch': 'seagreen'}
        for report in reports:
            hist_fig = go.Figure()
            hist_fig.add_trace(go.Histogram(
                x=report.valid.iterations,
                name='Valid Probes',
                marker=dict(color=colors.get(report.searcher_name, 'steelblue')),
                opacity=0.7
            ))
            hist_fig.add_trace(go.Histogram(
                x=report.invalid.iterations,
                name='Invalid Probes',
                marker=dict(color='gray'),
                opacity=0.7
            ))
            hist_fig.update_layout(
                title=f"{report.searcher_name} - Iterations of Correct Results",
                xaxis_title="Iterations",
                yaxis_title="Count",
                barmode='overlay',
                height=350
            )
            st.plotly_chart(hist_fig, use_container_width=True, key=f"hist_{report.searcher_name}")

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Configure Dataset**: Set the number of unique values and the valid/invalid probe counts
    2. **Select Searchers**: Choose linear search, binary search or both
    3. **Run Benchmark**: Click the "Run Benchmark" button to start the evaluation
    4. **Analyze Results**: View the result table and the iteration charts

    ### What is Measured

    - **Correct (valid)**: valid probes the searcher found
    - **Correct (invalid)**: invalid probes the searcher reported as not found
    - **Avg Iterations**: comparison steps per correct result; incorrect results are excluded
    - Binary search should need about log2(n) iterations, linear search about n/2 for present values
    """)
