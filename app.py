"""Streamlit front-end for the backup tool."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import streamlit as st

from backup_tool import BackupContext, JsonConfigRepository, RunBackupUseCase
from backup_tool.application.dto import BackupResponse
from backup_tool.domain.errors import BackupError
from backup_tool.domain.models import BackupConfig
from backup_tool.infrastructure.storage import config_store
from backup_tool.presentation.backup_report import entries_to_rows, issues_to_rows, render_csv, render_html


st.set_page_config(page_title="Backup Tool", layout="wide")
st.title("Backup Tool")


def config_to_dataframe(config: BackupConfig | None) -> pd.DataFrame:
    paths = config.input_paths if config else ()
    return pd.DataFrame(
        [{"input_path": str(path), "delete": False} for path in paths],
        columns=["input_path", "delete"],
    )


def dataframe_to_config(df: pd.DataFrame, output_path: str) -> BackupConfig:
    if "delete" in df.columns:
        df = df[~df["delete"].fillna(False).astype(bool)]
    paths = [str(value).strip() for value in df["input_path"].dropna()]
    return BackupConfig(
        input_paths=tuple(Path(path) for path in paths if path),
        output_path=Path(output_path.strip()),
    )


def run_backup(config_path: Path) -> BackupResponse:
    use_case = RunBackupUseCase(BackupContext(config_repository=JsonConfigRepository(config_path)))
    return use_case.execute()


if "view" not in st.session_state:
    st.session_state["view"] = "configure"
if "result" not in st.session_state:
    st.session_state["result"] = None


if st.session_state["view"] == "configure":
    config_path_text = st.text_input("Configuration file", value="backup_config.json")
    config_path = Path(config_path_text)

    current: BackupConfig | None = None
    if config_path.is_file():
        try:
            current = config_store.load_config(config_path)
        except BackupError as exc:
            st.error(str(exc))
    else:
        st.info("Configuration file not found; saving will create it.")

    with st.expander("Edit configuration", expanded=True):
        edited_df = st.data_editor(
            config_to_dataframe(current),
            num_rows="dynamic",
            hide_index=True,
            key="inputs_editor",
            use_container_width=True,
        )
        output_text = st.text_input(
            "Output directory",
            value=str(current.output_path) if current else "",
            key="output_path",
        )
        if st.button("Save configuration", key="save_config_btn"):
            if not output_text.strip():
                st.warning("Output directory cannot be empty")
            else:
                config_store.save_config(dataframe_to_config(edited_df, output_text), config_path)
                st.success(f"Saved {config_path}")
                st.rerun()

    run_btn = st.button("Run Backup", disabled=current is None)
    if run_btn and current is not None:
        with st.spinner("Archiving..."):
            try:
                response = run_backup(config_path)
            except BackupError as exc:
                st.error(str(exc))
                response = None
        if response is not None:
            issues = tuple(response.report.iter_all_issues())
            st.session_state["result"] = {
                "response": response,
                "issues_csv": render_csv(issues),
                "issues_html": render_html(response.report),
            }
            st.session_state["view"] = "results"
            st.rerun()
else:
    back_clicked = st.button("← Back", key="back_to_configure")
    if back_clicked:
        st.session_state["view"] = "configure"
        st.session_state["result"] = None
        st.rerun()

    result = st.session_state.get("result")
    if not result:
        st.info("No results available. Run a backup first.")
    else:
        response: BackupResponse = result["response"]
        report = response.report

        st.subheader("Summary")
        st.caption(f"Archive: {report.location}")
        summary = report.summary
        st.metric("Input paths", summary.total_inputs)
        st.metric("Files discovered", summary.discovered)
        st.metric("Entries archived", summary.archived)
        st.metric("Warnings", summary.warnings)

        tabs = st.tabs(["Entries", "Warnings"])
        with tabs[0]:
            st.dataframe(pd.DataFrame(entries_to_rows(report.entries)))
        with tabs[1]:
            st.dataframe(pd.DataFrame(issues_to_rows(tuple(report.iter_all_issues()))))
            st.download_button(
                "Download warnings CSV",
                data=result["issues_csv"],
                file_name="backup_warnings.csv",
                mime="text/csv",
            )
            st.download_button(
                "Download warnings HTML",
                data=result["issues_html"].encode("utf-8"),
                file_name="backup_warnings.html",
                mime="text/html",
            )
