# --- main.py ---

import os
import sys
import threading
from typing import Optional

# --- Kivy Imports ---
from kivy.app import App
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.treeview import TreeViewLabel
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from kivy.uix.button import Button
from kivy.clock import Clock
from kivy.properties import ObjectProperty
from kivy.lang import Builder
from plyer import filechooser

# --- Project Imports ---
from models import FileNode, FileTree, ReplayResult
import aggregator
import utils
from navigator import TreeError
from replay import replay_transcript
from transcript import TranscriptParseError

# --- Kivy Widget Definitions ---

class FileTreeNode(TreeViewLabel):
    node = ObjectProperty(None)

class MainLayout(BoxLayout):
    pass

# --- Main Application Class ---

class TranscriptViewerApp(App):

    # --- Internal State Properties ---
    replay_thread: Optional[threading.Thread] = None
    replay_result: Optional[ReplayResult] = None
    current_transcript_path: str = ""

    def build(self):
        return Builder.load_file(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'ui.kv'))

    # --- UI State Management ---

    def set_ui_state(self, state: str):
        ids = self.root.ids
        if state == 'replaying':
            ids.select_file_button.disabled = True
            ids.replay_button.disabled = True
            ids.status_label.text = "Replaying transcript..."
        elif state == 'ready':
            ids.select_file_button.disabled = False
            ids.replay_button.disabled = not bool(self.current_transcript_path)
            if not self.replay_result:
                ids.status_label.text = "Ready. Select a transcript."
            else:
                total_size = self.replay_result.total_size_bytes
                ids.status_label.text = f"Replay complete. Total size: {utils.format_bytes(total_size)}"

    # --- 1. Replay Logic ---

    def show_file_chooser(self):
        try:
            path = filechooser.open_file(
                title="Select a transcript",
                filters=[("Text files", "*.txt"), ("All files", "*")]
            )
            if path:
                self.current_transcript_path = path[0]
                self.root.ids.selected_file_label.text = self.current_transcript_path
                self.set_ui_state('ready')
        except Exception as e:
            self.show_popup("Error", f"Could not open file chooser: {e}")

    def start_replay(self):
        if not self.current_transcript_path:
            return

        self.clear_all_data()
        self.set_ui_state('replaying')
        self.replay_thread = threading.Thread(
            target=self._replay_thread_worker,
            args=(self.current_transcript_path,),
            daemon=True
        )
        self.replay_thread.start()

    def _replay_thread_worker(self, path: str):
        def on_progress(current_path):
            Clock.schedule_once(lambda dt: self._on_replay_progress(current_path))

        try:
            result = replay_transcript(path, on_progress=on_progress)
        except (TreeError, TranscriptParseError, OSError) as e:
            message = str(e)
            Clock.schedule_once(lambda dt: self._on_replay_error(message))
            return
        except Exception as e:
            message = f"An unexpected error occurred: {e}"
            Clock.schedule_once(lambda dt: self._on_replay_error(message))
            return
        Clock.schedule_once(lambda dt: self._on_replay_complete(result))

    def _on_replay_progress(self, current_path: str):
        self.root.ids.status_label.text = f"Replaying: {current_path}"

    def _on_replay_error(self, error_msg: str):
        self.show_popup("Replay Error", error_msg)
        self.set_ui_state('ready')

    def _on_replay_complete(self, result: ReplayResult):
        """UI Callback: Populates all UI elements once the replay is done."""
        self.replay_result = result
        tree = result.tree

        small_total = aggregator.sum_small_directories(tree)
        candidate = aggregator.find_directory_to_delete(tree)

        self.populate_tree_view(tree, candidate)

        used_percent = utils.calculate_percentage(
            tree.root.size_bytes, aggregator.TOTAL_DISK_CAPACITY
        )
        self.root.ids.small_dirs_label.text = \
            f"Small directories (<= {utils.format_bytes(aggregator.SMALL_DIRECTORY_THRESHOLD)}): " \
            f"{small_total} bytes"
        if candidate is None:
            self.root.ids.delete_candidate_label.text = "No directory needs to be deleted."
        else:
            self.root.ids.delete_candidate_label.text = \
                f"Delete {tree.path_of(candidate)}: {candidate.size_bytes} bytes " \
                f"({used_percent:.2f}% of disk in use)"

        self.set_ui_state('ready')
        self.replay_thread = None

    # --- 2. UI Population ---

    def clear_all_data(self):
        """Resets the UI and internal data to a clean state."""
        self.replay_result = None
        tree_view = self.root.ids.tree_view
        for tree_node in list(tree_view.iterate_all_nodes()):
            if tree_node is not tree_view.root:
                tree_view.remove_node(tree_node)
        self.root.ids.small_dirs_label.text = ""
        self.root.ids.delete_candidate_label.text = ""

    def populate_tree_view(self, tree: FileTree, candidate: Optional[FileNode]):
        tree_view = self.root.ids.tree_view

        def add(node: FileNode, parent_widget):
            text = f"{node.name}  ({utils.format_bytes(node.size_bytes)})"
            if candidate is not None and node.index == candidate.index:
                text = f"[b]{text}  <- delete[/b]"
            widget = tree_view.add_node(
                FileTreeNode(text=text, node=node, markup=True, is_open=node.is_root),
                parent_widget
            )
            for child in tree.children_of(node):
                add(child, widget)

        add(tree.root, None)

    # --- Helper Methods ---

    def show_popup(self, title: str, text: str):
        content = BoxLayout(orientation='vertical', padding='10dp')
        content.add_widget(Label(text=text))
        popup = Popup(
            title=title,
            content=content,
            size_hint=(0.75, 0.5)
        )
        btn_close = Button(text="Close", size_hint_y=None, height='40dp')
        btn_close.bind(on_press=popup.dismiss)
        content.add_widget(btn_close)
        popup.open()

# --- Entry Point ---
if __name__ == "__main__":
    if sys.platform == 'win32':
        try:
            import ctypes
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except Exception as e:
            print(f"Could not set DPI awareness: {e}")
    TranscriptViewerApp().run()
