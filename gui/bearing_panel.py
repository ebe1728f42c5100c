"""
Bearing input panel UI components.
"""

from PySide6.QtWidgets import (QGroupBox, QVBoxLayout, QHBoxLayout, QLabel,
                               QDoubleSpinBox, QSlider, QPushButton, QTextEdit)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont


def setup_bearing_panel(main_window):
    """Setup the bearing controls and the log output, returns the group box"""
    bearing_group = QGroupBox("Bearing")
    bearing_layout = QVBoxLayout(bearing_group)

    # Numeric entry
    spin_layout = QHBoxLayout()
    spin_layout.addWidget(QLabel("Heading (°):"))
    main_window.bearing_spin = QDoubleSpinBox()
    main_window.bearing_spin.setRange(0.0, 360.0)
    main_window.bearing_spin.setDecimals(1)
    main_window.bearing_spin.setSingleStep(0.1)
    main_window.bearing_spin.setWrapping(True)
    main_window.bearing_spin.setValue(main_window.compass_view.bearing % 360.0)
    spin_layout.addWidget(main_window.bearing_spin)
    bearing_layout.addLayout(spin_layout)

    # Coarse slider, whole degrees
    main_window.bearing_slider = QSlider(Qt.Horizontal)
    main_window.bearing_slider.setRange(0, 359)
    main_window.bearing_slider.setValue(int(main_window.bearing_spin.value()) % 360)
    bearing_layout.addWidget(main_window.bearing_slider)

    main_window.reset_north_btn = QPushButton("Reset to North")
    bearing_layout.addWidget(main_window.reset_north_btn)

    main_window.bearing_readout = QLabel()
    main_window.bearing_readout.setFont(QFont("Arial", 14, QFont.Bold))
    main_window.bearing_readout.setAlignment(Qt.AlignCenter)
    bearing_layout.addWidget(main_window.bearing_readout)

    main_window.log_output = QTextEdit()
    main_window.log_output.setReadOnly(True)
    main_window.log_output.setFont(QFont("Consolas", 9))
    bearing_layout.addWidget(main_window.log_output)

    def on_spin_changed(value):
        if int(value) % 360 != main_window.bearing_slider.value():
            main_window.bearing_slider.blockSignals(True)
            main_window.bearing_slider.setValue(int(value) % 360)
            main_window.bearing_slider.blockSignals(False)
        main_window.set_bearing(value)

    def on_slider_changed(value):
        main_window.bearing_spin.setValue(float(value))

    main_window.bearing_spin.valueChanged.connect(on_spin_changed)
    main_window.bearing_slider.valueChanged.connect(on_slider_changed)

    def on_reset_north():
        main_window.bearing_spin.setValue(0.0)
        # The spin box may already read 0.0 while the compass holds 360 or 720
        main_window.set_bearing(0.0)

    main_window.reset_north_btn.clicked.connect(on_reset_north)

    return bearing_group
