import gradio as gr

from json_variant_extractor.config import load_settings, setup_logging
from json_variant_extractor.handlers import export_results_handler, load_and_analyze_json

settings = load_settings()
setup_logging(settings.log_level)

# --- UI Definition ---
with gr.Blocks(title="JSON Variant Extractor") as demo:
    gr.Markdown("# JSON Schema Variants and Coordinates")
    gr.Markdown("Upload a JSON file to list its distinct schema variants and the geo coordinates it contains.")

    with gr.Row():
        # Left Panel: Input & Export
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="schema_variants")
            export_btn = gr.Button("Export Results", variant="primary", interactive=False)
            download_output = gr.File(label="Download Result")

        # Right Panel: Results
        with gr.Column(scale=2):
            gr.Markdown("### Schema Variants")
            variants_output = gr.JSON(label="Variants")

            gr.Markdown("### Coordinates")
            coords_output = gr.JSON(label="Coordinates")
            coords_table = gr.Dataframe(
                headers=["lat", "lng"],
                datatype=["number", "number"],
                col_count=(2, "fixed"),
                interactive=False,
                label="Coordinate Pairs",
            )

    file_input.upload(
        fn=load_and_analyze_json,
        inputs=[file_input],
        outputs=[variants_output, coords_output, coords_table, status_msg, export_btn],
    )

    export_btn.click(
        fn=export_results_handler,
        inputs=[variants_output, coords_output, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
