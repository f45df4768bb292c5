from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
from typing import List, Tuple
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_summer.summarize import (Algorithm, SummarizerConfig, summarize, format_summary,
                                   resolve_count, filter_sentences, get_strategy, TextRankStrategy, arrange)
from text_summer.preprocessing import split_sentences, word_count
from text_summer.similarity import build_similarity_matrix, build_overlap_matrix
from text_summer.scoring import centroid_scores
from text_summer.errors import NonConvergenceError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("text_summer.app")

def extract_markdown_text(md_content: str) -> str:
    """Strip Markdown markup so only prose reaches the sentence splitter."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    return text.strip()

def load_text_from_file(uploaded_file) -> str:
    content = uploaded_file.read().decode("utf-8")
    if uploaded_file.name.lower().endswith('.md'):
        return extract_markdown_text(content)
    return content

def label_matrix(M: List[List[float]]) -> pd.DataFrame:
    labels = [f"S{i+1}" for i in range(len(M))]
    return pd.DataFrame(M, columns=labels, index=labels)

def draw_graph_visualization(simM: List[List[float]], scores: List[float], selected: List[int]):
    """Sentence graph: edge width follows the matrix value, node size the score."""
    G = nx.Graph()
    n = len(simM)
    for i in range(n):
        G.add_node(i)
    for i in range(n):
        for j in range(i+1, n):
            if simM[i][j] > 0:
                G.add_edge(i, j, weight=simM[i][j])

    fig, ax = plt.subplots(figsize=(8, 8))
    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

    max_score = max(scores) if scores and max(scores) > 0 else 1.0
    sizes = [300 + 1200 * (scores[i] / max_score) for i in G.nodes()]
    colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=sizes, node_color=colors, alpha=0.8)

    weights = [d['weight'] for _, _, d in G.edges(data=True)]
    if weights:
        max_weight = max(weights)
        nx.draw_networkx_edges(G, pos, ax=ax, width=[3 * w / max_weight for w in weights],
                               alpha=0.4, edge_color='gray')
    nx.draw_networkx_labels(G, pos, {i: f"S{i+1}" for i in G.nodes()}, ax=ax,
                            font_size=10, font_weight='bold')
    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()
    return buf

def create_sidebar_controls() -> Tuple[SummarizerConfig, str, bool]:
    st.sidebar.header("Parameters")
    algorithm = st.sidebar.selectbox(
        "Algorithm",
        options=[a.value for a in Algorithm],
        help="textrank: edit-distance graph + PageRank; centroid: word overlap"
    )
    value = st.sidebar.text_input(
        "Summary size",
        value="30%",
        help="e.g. '3 sentences', '30%' or '0.3'"
    )
    preserve_order = st.sidebar.checkbox("Preserve sentence order", value=True)
    list_style = st.sidebar.selectbox("List style", options=["none", "ordered", "unordered"])
    skip_min = st.sidebar.number_input("Skip sentences with at most N words", min_value=0, value=0, step=1)
    skip_max = st.sidebar.number_input("Skip sentences with at least N words (0 = off)", min_value=0, value=0, step=1)

    st.sidebar.header("PageRank")
    damping = st.sidebar.slider("Damping factor", min_value=0.05, max_value=0.95, value=0.85, step=0.05)
    tolerance = st.sidebar.number_input("Tolerance", min_value=0.0, value=0.0001, format="%.6f")
    max_iter = st.sidebar.number_input("Max iterations", min_value=1, value=1000, step=100)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    cfg = SummarizerConfig(
        algorithm=Algorithm(algorithm),
        preserve_order=preserve_order,
        list_style=list_style,
        skip_min_words=int(skip_min) or None,
        skip_max_words=int(skip_max) or None,
        damping=damping,
        tolerance=tolerance,
        max_iter=int(max_iter),
    )
    return cfg, value, debug_mode

def debug_pipeline(text: str, value: str, cfg: SummarizerConfig) -> List[str]:
    """Run the pipeline step by step, showing intermediate results."""

    # Step 1: Segmentation
    st.header("Step 1: Sentence segmentation")
    sentences = split_sentences(text)
    kept = filter_sentences(sentences, cfg.skip_min_words, cfg.skip_max_words)
    st.success(f"Split into {len(sentences)} sentences, {len(kept)} kept after word filters")
    st.dataframe(pd.DataFrame({
        "Sentence #": [i+1 for i in range(len(kept))],
        "Words": [word_count(s) for s in kept],
        "Text": kept,
    }), use_container_width=True)

    count = resolve_count(value, len(kept))
    st.metric("Target Sentences", count)
    if not kept:
        st.warning("No sentences left to rank")
        return []

    # Step 2: Pairwise matrix
    algorithm = Algorithm(cfg.algorithm)
    st.header("Step 2: Pairwise matrix")
    if algorithm is Algorithm.TEXTRANK:
        st.write("**Running:** word-level edit distance for every sentence pair")
        M = build_similarity_matrix(kept)
    else:
        st.write("**Running:** word overlap for every sentence pair")
        M = build_overlap_matrix(kept)
    if len(M) <= 50:
        st.dataframe(label_matrix(M), use_container_width=True)
    off_diag = np.array([M[i][j] for i in range(len(M)) for j in range(len(M)) if i != j], dtype=float)
    if off_diag.size:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Min", f"{off_diag.min():.2f}")
        with col2:
            st.metric("Mean", f"{off_diag.mean():.2f}")
        with col3:
            st.metric("Max", f"{off_diag.max():.2f}")

    # Step 3: Ranking
    st.header("Step 3: Ranking")
    strategy = get_strategy(cfg)
    if isinstance(strategy, TextRankStrategy):
        result = strategy.rank(kept)
        scores = result.as_list()
        st.success(f"PageRank converged after {result.iterations} iterations")
        st.metric("Probability mass", f"{sum(scores):.4f}")
    else:
        scores = centroid_scores(M)
    selected = strategy.pick(scores, count)
    st.dataframe(pd.DataFrame({
        "Sentence #": [i+1 for i in range(len(kept))],
        "Score": scores,
        "Rank": [selected.index(i)+1 if i in selected else None for i in range(len(kept))],
        "Text": kept,
    }), use_container_width=True)

    if len(kept) <= 50:
        st.subheader("Graph Visualization")
        st.image(draw_graph_visualization(M, scores, selected),
                 caption="Selected sentences in gold", use_column_width=True)

    # Step 4: Selection
    st.header("Step 4: Selection")
    return arrange(selected, kept, cfg.preserve_order)

def main():
    st.title("Responsive Text Summarizer")
    st.write("Upload a text file and extract its most representative sentences")

    cfg, value, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'md'],
        help="Plain text or Markdown"
    )
    if uploaded_file is None:
        return

    text = load_text_from_file(uploaded_file)
    st.subheader("Original Text")
    st.text_area("Content", text, height=200, disabled=True)

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                sentences = debug_pipeline(text, value, cfg)
            else:
                with st.spinner("Generating summary..."):
                    sentences = summarize(text, value, cfg)
        except NonConvergenceError as e:
            logger.warning("Summarization failed: %s", e)
            st.error(f"Ranking did not converge: {e}. Try a larger tolerance or more iterations.")
            return
        except ValueError as e:
            st.error(str(e))
            return

        st.markdown("---")
        st.header("Summary")
        result = format_summary(sentences, cfg.separator, cfg.list_style)
        if cfg.list_style in ("ordered", "unordered"):
            st.markdown(result, unsafe_allow_html=True)
        else:
            st.text_area("Generated Summary", result, height=150, disabled=True)

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Original Words", len(text.split()))
        with col2:
            st.metric("Summary Words", sum(word_count(s) for s in sentences))

if __name__ == "__main__":
    main()
