import os
import sys

import streamlit as st

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from chudsplit.planner import plan_digits
from chudsplit.render import pi_string
from chudsplit.stats import RunStats, timed
from chudsplit.verify import verify_pi_string


def _style():
    st.markdown(
        """
        <style>
        :root {--brand:#0ea5e9;--ink:#0b132b;--muted:#6b7280;--bg0:#0b132b;--bg1:#16213e;--fg:#e5e7eb}
        .stApp {background: radial-gradient(60% 80% at 20% 10%, rgba(14,165,233,.15), transparent 40%), linear-gradient(180deg, var(--bg0), var(--bg1))}
        .title-wrap {padding: 24px 20px 10px; border-bottom: 1px solid rgba(255,255,255,.08); margin-bottom: 12px}
        .title {font-weight: 800; font-size: 28px; letter-spacing: .2px; color: white}
        .subtitle {color: var(--fg); opacity:.8; margin-top: 6px}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _header():
    st.markdown(
        """
        <div class="title-wrap">
          <div class="title">chudsplit</div>
          <div class="subtitle">π by the Chudnovsky series, binary splitting across parallel workers.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _cli_command(digits: int, workers: int, processes: bool, verify: bool, verify_samples: int) -> str:
    parts = ["python3", "-m", "chudsplit", "compute"]
    parts += ["--digits", str(int(digits))]
    parts += ["--threads", str(int(workers))]
    if processes:
        parts.append("--processes")
    if verify:
        parts += ["--verify", "--verify-samples", str(int(verify_samples))]
    parts.append("--stats")
    return " ".join(parts)


def main():
    st.set_page_config(page_title="chudsplit", page_icon="🧮", layout="wide")
    _style()
    _header()
    if "history" not in st.session_state:
        st.session_state.history = []
    with st.sidebar:
        digits = st.number_input("Digits after point", min_value=0, max_value=2_000_000, value=1000, step=1000, key="digits")
        workers = st.slider("Workers", min_value=1, max_value=os.cpu_count() or 8, value=1, key="workers")
        processes = st.checkbox("Use processes instead of threads", value=False, key="processes")
        with st.expander("Advanced"):
            verify = st.checkbox("Verify against spigot", value=False, key="verify")
            verify_samples = st.number_input("Verify digits", min_value=0, max_value=20_000, value=1000, step=500, key="verify_samples")
        generate = st.button("Compute", type="primary", use_container_width=True)

    if not generate:
        if st.session_state.history:
            st.subheader("Recent runs")
            for item in st.session_state.history[:5]:
                st.write(item)
        return

    plan = plan_digits(int(digits))
    s, elapsed = timed(pi_string, int(digits), workers=int(workers), use_processes=processes)
    if verify:
        ok, kind = verify_pi_string(s, int(verify_samples))
        if ok:
            st.success(f"Verification passed ({kind})")
        else:
            st.error(f"Verification failed ({kind})")
            return
    stats = RunStats(int(digits), int(workers), elapsed)
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Time (s)", f"{stats.elapsed:.3f}")
    with col2:
        st.metric("Digits / s", f"{stats.digits_per_second:,.0f}")
    with col3:
        st.metric("Series terms", f"{plan.series_length:,}")
    with col4:
        st.metric("Precision bits", f"{plan.precision_bits:,}")
    st.code(s[:5000] + ("\n…" if len(s) > 5000 else ""), language="text")
    st.download_button("Download", data=s.encode("ascii"), file_name=f"pi_{int(digits)}.txt", mime="text/plain", use_container_width=True)
    st.code(_cli_command(digits, workers, processes, verify, verify_samples), language="bash")
    st.session_state.history.insert(0, f"{int(digits)} digits, {int(workers)} workers, {elapsed:.3f}s")


if __name__ == "__main__":
    main()
