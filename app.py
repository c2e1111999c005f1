import logging
from functools import partial

import gradio as gr

from schema_builder import config
from schema_builder.fields import FIELD_TYPES, is_nested
from schema_builder.handlers import (
    handle_add_child,
    handle_add_root,
    handle_delete,
    handle_key_change,
    handle_required_change,
    handle_type_change,
    initial_fields,
    render_document_handler,
)


def setup_logging(level: str = config.LOG_LEVEL):
    logger = logging.getLogger("schema_builder")
    logger.setLevel(level)

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    if not logger.handlers:
        logger.addHandler(handler)
    return logger


# --- UI Definition ---
with gr.Blocks(title="Schema Builder") as demo:
    gr.Markdown("# Schema Builder")
    gr.Markdown("Describe the fields of a record and see the example document it produces.")

    # State
    fields_state = gr.State(value=initial_fields())

    with gr.Row():
        # Left Panel: Field tree
        with gr.Column(scale=1):
            gr.Markdown("### Fields")

            @gr.render(inputs=[fields_state], triggers=[fields_state.change, demo.load])
            def render_fields(fields):
                if not fields:
                    gr.Markdown("No fields yet.")

                def recursive_ui(field, nested=False):
                    with gr.Row(elem_classes=["row", "nested"] if nested else ["row"]):
                        key_box = gr.Textbox(
                            value=field.key,
                            placeholder="field name",
                            show_label=False,
                            scale=2,
                        )
                        type_dropdown = gr.Dropdown(
                            choices=list(FIELD_TYPES),
                            value=field.type,
                            show_label=False,
                            scale=2,
                        )
                        required_cb = gr.Checkbox(value=field.required, label="required", scale=1)
                        delete_btn = gr.Button("Delete", variant="stop", scale=1)

                    key_box.blur(fn=partial(handle_key_change, field.id), inputs=[key_box, fields_state], outputs=[fields_state])
                    key_box.submit(fn=partial(handle_key_change, field.id), inputs=[key_box, fields_state], outputs=[fields_state])
                    type_dropdown.input(fn=partial(handle_type_change, field.id), inputs=[type_dropdown, fields_state], outputs=[fields_state])
                    required_cb.input(fn=partial(handle_required_change, field.id), inputs=[required_cb, fields_state], outputs=[fields_state])
                    delete_btn.click(fn=partial(handle_delete, field.id), inputs=[fields_state], outputs=[fields_state])

                    if is_nested(field):
                        with gr.Column(variant="panel"):
                            for child in field.children:
                                recursive_ui(child, nested=True)
                            add_nested_btn = gr.Button("Add Nested Field", size="sm")
                            add_nested_btn.click(fn=partial(handle_add_child, field.id), inputs=[fields_state], outputs=[fields_state])

                for field in fields or ():
                    recursive_ui(field)

            add_field_btn = gr.Button("Add Field", variant="primary")

        # Right Panel: Document preview
        with gr.Column(scale=1):
            gr.Markdown("### JSON Output")
            json_output = gr.Code(value=render_document_handler(initial_fields()), language="json", interactive=False)

    add_field_btn.click(
        fn=handle_add_root,
        inputs=[fields_state],
        outputs=[fields_state],
    )

    fields_state.change(
        fn=render_document_handler,
        inputs=[fields_state],
        outputs=[json_output],
    )


def main():
    logger = setup_logging()
    logger.info("Starting Schema Builder on %s:%d", config.HOST, config.PORT)
    demo.launch(server_name=config.HOST, server_port=config.PORT)


if __name__ == "__main__":
    main()
