# ui/password_page.py
from __future__ import annotations
import json
import streamlit as st
import streamlit.components.v1 as components
from loguru import logger

from core.config import CLASS_LABELS, CLASS_ORDER, DEFAULT_PRESET, LENGTH_PRESETS, STRENGTH_TIERS
from core.errors import PasswordGenerationError
from core.password_utils import CharacterClassSelection, generate
from core.session_utils import clear_history, history_frame, preset_length, push_history, toggle_option
from core.strength_utils import assess

_PRESET_LABELS = {
    "short": "Short",
    "medium": "Medium",
    "strong": "Strong",
    "maximum": "Maximum",
}


def _init_state() -> None:
    ss = st.session_state
    ss.setdefault("pw_selection", CharacterClassSelection())
    ss.setdefault("pw_history", [])
    ss.setdefault("pw_current", "")
    for key in CLASS_ORDER:
        ss.setdefault(f"pw_opt_{key}", getattr(ss.pw_selection, key))


def _on_toggle(key: str) -> None:
    ss = st.session_state
    new_sel = toggle_option(ss.pw_selection, key)
    if new_sel == ss.pw_selection:
        # Checkbox trả về trạng thái cũ: không cho tắt nhóm cuối cùng
        ss[f"pw_opt_{key}"] = True
    ss.pw_selection = new_sel


def _generate(length: int) -> None:
    ss = st.session_state
    try:
        pw = generate(length, ss.pw_selection)
    except PasswordGenerationError as e:
        logger.warning("Password generation rejected: {}", e)
        st.error(f"Generation error: {e}")
        return
    ss.pw_current = pw
    ss.pw_history = push_history(ss.pw_history, pw)


def _strength_meter(length: int, selection: CharacterClassSelection) -> None:
    s = assess(length, selection)
    segments = "".join(
        f'<div style="flex:1;height:8px;border-radius:4px;background:'
        f'{s.color if tier <= s.tier_level else "#e5e7eb"};"></div>'
        for _, tier, _, _ in STRENGTH_TIERS
    )
    st.markdown(
        f"""
        <div style="display:flex;gap:4px;margin:6px 0;">{segments}</div>
        <div style="color:{s.color};font-weight:600;">{s.label}
          <span style="color:#6b7280;font-weight:400;">· ~{s.entropy_bits} bits</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _password_box(password: str) -> None:
    components.html(
        f"""
<div style="display:flex;gap:8px;align-items:center;font-family:system-ui,sans-serif;">
  <input id="pw" readonly style="flex:1;font:18px ui-monospace,Consolas,Monaco,monospace;
         padding:8px 10px;border:1px solid #d1d5db;border-radius:8px;" />
  <button id="cpy" style="background:#2563eb;border:none;color:#fff;padding:8px 12px;
          border-radius:6px;cursor:pointer;">Copy</button>
</div>
<script>
const pw = {json.dumps(password)};
const input = document.getElementById("pw");
const btn = document.getElementById("cpy");
input.value = pw;

function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  input.select();
  try {{ document.execCommand('copy'); }} finally {{ input.blur(); }}
  return Promise.resolve();
}}

btn.addEventListener("click", () => {{
  copyText(pw).then(() => {{
    btn.textContent = "Copied";
    setTimeout(() => btn.textContent = "Copy", 900);
  }}).catch(() => alert("Clipboard blocked by browser"));
}});
</script>
        """,
        height=64,
    )


def _history_table(history) -> None:
    rows = history_frame(history)[["#", "Password", "Masked", "Generated at"]].to_dict("records")
    frame_height = min(520, 70 + 40 * len(rows))
    components.html(
        f"""
<style>
  table#pwhist {{ border-collapse: collapse; width: 100%; border: 1px solid #e5e7eb;
                 font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
  td, th {{ padding: 6px 10px; }}
  td.pw {{ font-family: ui-monospace,Consolas,Monaco,monospace; cursor: pointer; }}
  td.time {{ color: #6b7280; white-space: nowrap; }}
  button.cpy {{ background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer; }}
  @media (prefers-color-scheme: dark) {{
    table#pwhist {{ border-color: #374151; color: #e5e7eb; }}
  }}
</style>
<table id="pwhist"><tbody id="pwbody"></tbody></table>
<script>
const data = {json.dumps(rows)};
const tbody = document.getElementById("pwbody");

function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  const ta = document.createElement('textarea');
  ta.value = text;
  ta.style.position = 'fixed';
  ta.style.opacity = '0';
  document.body.appendChild(ta);
  ta.select();
  try {{ document.execCommand('copy'); }}
  finally {{ document.body.removeChild(ta); }}
  return Promise.resolve();
}}

data.forEach((item) => {{
  const tr = document.createElement("tr");
  let revealed = false;

  const tdIdx = document.createElement("td");
  tdIdx.textContent = String(item["#"]);

  // masked; hover or click reveals
  const tdPw = document.createElement("td");
  tdPw.className = "pw";
  tdPw.textContent = item.Masked;
  const show = (on) => {{ tdPw.textContent = on ? item.Password : item.Masked; }};
  tdPw.addEventListener("mouseenter", () => show(true));
  tdPw.addEventListener("mouseleave", () => show(revealed));
  tdPw.addEventListener("click", () => {{ revealed = !revealed; show(revealed); }});

  const tdTime = document.createElement("td");
  tdTime.className = "time";
  tdTime.textContent = item["Generated at"];

  const tdBtn = document.createElement("td");
  tdBtn.style.textAlign = "right";
  const btn = document.createElement("button");
  btn.className = "cpy";
  btn.textContent = "Copy";
  btn.addEventListener("click", () => {{
    copyText(item.Password).then(() => {{
      btn.textContent = "✓";
      setTimeout(() => btn.textContent = "Copy", 900);
    }}).catch(() => alert("Clipboard blocked by browser"));
  }});
  tdBtn.appendChild(btn);

  [tdIdx, tdPw, tdTime, tdBtn].forEach((td) => tr.appendChild(td));
  tbody.appendChild(tr);
}});
</script>
        """,
        height=frame_height,
    )


def render():
    st.subheader("🔐 SecurePass — Password Generator")
    _init_state()
    ss = st.session_state

    colL, colR = st.columns([3, 2])
    with colL:
        preset = st.radio(
            "Length preset",
            list(LENGTH_PRESETS.keys()),
            index=list(LENGTH_PRESETS.keys()).index(DEFAULT_PRESET),
            format_func=lambda k: f"{_PRESET_LABELS[k]} ({LENGTH_PRESETS[k]})",
            horizontal=True,
        )
        length = preset_length(preset)
    with colR:
        st.markdown("**Character sets**")
        for key in CLASS_ORDER:
            st.checkbox(
                CLASS_LABELS[key],
                key=f"pw_opt_{key}",
                on_change=_on_toggle,
                args=(key,),
            )

    _strength_meter(length, ss.pw_selection)

    gen = st.button("🎲 Generate", key="pw_generate", type="primary")
    if gen or not ss.pw_current:
        _generate(length)

    if ss.pw_current:
        _password_box(ss.pw_current)

    if ss.pw_history:
        with st.expander(f"History ({len(ss.pw_history)})"):
            st.caption("Hover or click a password to reveal it.")
            _history_table(ss.pw_history)
            if st.button("🧹 Clear history", key="pw_clear"):
                ss.pw_history = clear_history()
                st.rerun()
    else:
        st.caption("No passwords generated yet.")

    # Không có phím tắt: iframe của component không nhận phím của trang
    st.caption("Keyboard shortcuts (Enter, Esc, Ctrl+C) are not available here; use the buttons above.")
