"""
Waveforms for Babylon oscillators and LFOs

The discriminant of each waveform is its index in the plugin's waveform
menu, which is what the preset file stores. Both OSCWaveType_n and
LFOWaveType_n use this table.
"""

from .format_enum import FormatEnum


class Waveform(FormatEnum):
    # Sine
    SINE = 0, 'Sine'
    SINE_ROOT_1_5 = 1, 'Sine Root 1.5'
    SINE_ROOT_2 = 2, 'Sine Root 2'
    SINE_ROOT_3 = 3, 'Sine Root 3'
    SINE_ROOT_4 = 4, 'Sine Root 4'
    SINE_POWER_1_5 = 5, 'Sine Power 1.5'
    SINE_POWER_2 = 6, 'Sine Power 2'
    SINE_POWER_3 = 7, 'Sine Power 3'
    SINE_POWER_4 = 8, 'Sine Power 4'
    SINE_AM_1 = 9, 'Sine AM 1'
    SINE_AM_2 = 10, 'Sine AM 2'
    SINE_AM_3 = 11, 'Sine AM 3'
    SINE_AM_4 = 12, 'Sine AM 4'
    SINE_AM_5 = 13, 'Sine AM 5'
    SINE_FM_A_1 = 14, 'Sine FM A 1'
    SINE_FM_A_2 = 15, 'Sine FM A 2'
    SINE_FM_A_3 = 16, 'Sine FM A 3'
    SINE_FM_A_4 = 17, 'Sine FM A 4'
    SINE_FM_A_5 = 18, 'Sine FM A 5'
    SINE_FM_A_6 = 19, 'Sine FM A 6'
    SINE_FM_B_1 = 20, 'Sine FM B 1'
    SINE_FM_B_2 = 21, 'Sine FM B 2'
    SINE_FM_B_3 = 22, 'Sine FM B 3'
    SINE_FM_B_4 = 23, 'Sine FM B 4'
    SINE_FM_B_5 = 24, 'Sine FM B 5'
    SINE_FM_C_1 = 25, 'Sine FM C 1'
    SINE_FM_C_2 = 26, 'Sine FM C 2'
    SINE_FM_C_3 = 27, 'Sine FM C 3'
    SINE_FM_C_4 = 28, 'Sine FM C 4'
    SINE_FM_C_5 = 29, 'Sine FM C 5'
    SINE_FM_C_6 = 30, 'Sine FM C 6'
    SINE_FM_C_7 = 31, 'Sine FM C 7'
    SINE_FM_C_8 = 32, 'Sine FM C 8'
    SINE_FM_D_1 = 33, 'Sine FM D 1'
    SINE_FM_D_2 = 34, 'Sine FM D 2'
    SINE_FM_D_3 = 35, 'Sine FM D 3'
    SINE_FM_D_4 = 36, 'Sine FM D 4'
    SINE_FM_D_5 = 37, 'Sine FM D 5'
    SINE_FM_D_6 = 38, 'Sine FM D 6'
    SINE_FM_D_7 = 39, 'Sine FM D 7'
    SINE_FM_D_8 = 40, 'Sine FM D 8'
    SINE_FM_D_9 = 41, 'Sine FM D 9'
    SINE_FM_D_10 = 42, 'Sine FM D 10'
    SINE_FM_D_11 = 43, 'Sine FM D 11'
    SINE_FM_D_12 = 44, 'Sine FM D 12'
    SINE_FM_D_13 = 45, 'Sine FM D 13'
    SINE_FM_D_14 = 46, 'Sine FM D 14'
    SINE_FM_D_15 = 47, 'Sine FM D 15'
    SINE_FM_KICK_1 = 48, 'Sine FM Kick 1'
    SINE_FM_KICK_2 = 49, 'Sine FM Kick 2'
    SINE_FM_KICK_3 = 50, 'Sine FM Kick 3'
    SINE_FM_KICK_4 = 51, 'Sine FM Kick 4'
    SINE_FM_KICK_5 = 52, 'Sine FM Kick 5'
    SINE_FM_KICK_6 = 53, 'Sine FM Kick 6'
    SINE_FM_KICK_7 = 54, 'Sine FM Kick 7'
    SINE_FM_KICK_8 = 55, 'Sine FM Kick 8'
    SINE_FM_KICK_9 = 56, 'Sine FM Kick 9'
    SINE_FM_KICK_10 = 57, 'Sine FM Kick 10'
    SINE_FM_KICK_11 = 58, 'Sine FM Kick 11'
    SINE_FM_KICK_12 = 59, 'Sine FM Kick 12'

    # Triangle
    TRIANGLE = 60, 'Triangle'
    TRIANGLE_ROOT_2 = 61, 'Triangle Root 2'
    TRIANGLE_ROOT_3 = 62, 'Triangle Root 3'
    TRIANGLE_ROOT_4 = 63, 'Triangle Root 4'
    TRIANGLE_ROOT_5 = 64, 'Triangle Root 5'

    # Saw
    SAW = 65, 'Saw'
    SAW_POWER_1 = 66, 'Saw Power 1'
    SAW_POWER_2 = 67, 'Saw Power 2'
    SAW_SINE_1 = 68, 'Saw Sine 1'
    SAW_SINE_2 = 69, 'Saw Sine 2'
    SAW_SINE_3 = 70, 'Saw Sine 3'
    SAW_2X = 71, 'Saw 2x'

    # Square
    SQUARE = 72, 'Square'
    SQUARE_SMOOTH_1 = 73, 'Square Smooth 1'
    SQUARE_SMOOTH_2 = 74, 'Square Smooth 2'
    SQUARE_HALF_ROOT = 75, 'Square Half Root'
    SQUARE_HALF_ROOT_POWER = 76, 'Square Half Root Power'
    SQUARE_POWER = 77, 'Square Power'
    SQUARE_DOUBLE_POWER_1 = 78, 'Square Double Power 1'
    SQUARE_DOUBLE_POWER_2 = 79, 'Square Double Power 2'
    SQUARE_ATTACK_POWER = 80, 'Square Attack Power'
    SQUARE_TRISTATE_1 = 81, 'Square Tristate 1'
    SQUARE_TRISTATE_2 = 82, 'Square Tristate 2'
    SQUARE_TRISTATE_3 = 83, 'Square Tristate 3'
    SQUARE_TRISTATE_4 = 84, 'Square Tristate 4'
    SQUARE_TRISTATE_5 = 85, 'Square Tristate 5'
    SQUARE_TRISTATE_6 = 86, 'Square Tristate 6'
    SQUARE_FM_1 = 87, 'Square FM 1'
    SQUARE_FM_2 = 88, 'Square FM 2'
    SQUARE_FM_3 = 89, 'Square FM 3'
    SQUARE_FM_4 = 90, 'Square FM 4'
    SQUARE_FM_5 = 91, 'Square FM 5'
    SQUARE_FM_6 = 92, 'Square FM 6'
    SQUARE_FM_7 = 93, 'Square FM 7'
    SQUARE_FM_8 = 94, 'Square FM 8'

    # Pulse
    PULSE_1 = 95, 'Pulse 1'
    PULSE_2 = 96, 'Pulse 2'
    PULSE_3 = 97, 'Pulse 3'
    PULSE_4 = 98, 'Pulse 4'
    PULSE_SQUARE = 99, 'Pulse Square'
    PULSE_SQUARE_SMOOTH = 100, 'Pulse Square Smooth'
    PULSE_SMOOTH_1 = 101, 'Pulse Smooth 1'
    PULSE_SMOOTH_2 = 102, 'Pulse Smooth 2'

    # Voice
    VOICE_1 = 103, 'Voice 1'
    VOICE_2 = 104, 'Voice 2'
    VOICE_3 = 105, 'Voice 3'
    VOICE_4 = 106, 'Voice 4'
    VOICE_5 = 107, 'Voice 5'
    VOICE_6 = 108, 'Voice 6'
    VOICE_7 = 109, 'Voice 7'
    VOICE_8 = 110, 'Voice 8'
    VOICE_9 = 111, 'Voice 9'
    VOICE_10 = 112, 'Voice 10'
    VOICE_11 = 113, 'Voice 11'
    VOICE_12 = 114, 'Voice 12'
    VOICE_13 = 115, 'Voice 13'
    VOICE_14 = 116, 'Voice 14'
    VOICE_15 = 117, 'Voice 15'
    VOICE_16 = 118, 'Voice 16'
    VOICE_17 = 119, 'Voice 17'
    VOICE_18 = 120, 'Voice 18'
    VOICE_19 = 121, 'Voice 19'
    VOICE_20 = 122, 'Voice 20'
    VOICE_21 = 123, 'Voice 21'
    VOICE_22 = 124, 'Voice 22'
    VOICE_23 = 125, 'Voice 23'
    VOICE_24 = 126, 'Voice 24'
    VOICE_25 = 127, 'Voice 25'
    VOICE_26 = 128, 'Voice 26'
    VOICE_27 = 129, 'Voice 27'
    VOICE_28 = 130, 'Voice 28'
    VOICE_29 = 131, 'Voice 29'
    VOICE_30 = 132, 'Voice 30'

    # Formant
    FORMANT_A_1 = 133, 'Formant A 1'
    FORMANT_A_2 = 134, 'Formant A 2'
    FORMANT_A_3 = 135, 'Formant A 3'
    FORMANT_A_4 = 136, 'Formant A 4'
    FORMANT_A_5 = 137, 'Formant A 5'
    FORMANT_A_6 = 138, 'Formant A 6'
    FORMANT_A_7 = 139, 'Formant A 7'
    FORMANT_A_8 = 140, 'Formant A 8'
    FORMANT_B_1 = 141, 'Formant B 1'
    FORMANT_B_2 = 142, 'Formant B 2'
    FORMANT_B_3 = 143, 'Formant B 3'
    FORMANT_B_4 = 144, 'Formant B 4'
    FORMANT_B_5 = 145, 'Formant B 5'
    FORMANT_B_6 = 146, 'Formant B 6'
    FORMANT_B_7 = 147, 'Formant B 7'
    FORMANT_B_8 = 148, 'Formant B 8'

    # Synthetic voice
    SYNTHETIC_VOICE_1 = 149, 'Synthetic Voice 1'
    SYNTHETIC_VOICE_2 = 150, 'Synthetic Voice 2'
    SYNTHETIC_VOICE_3 = 151, 'Synthetic Voice 3'
    SYNTHETIC_VOICE_4 = 152, 'Synthetic Voice 4'
    SYNTHETIC_VOICE_5 = 153, 'Synthetic Voice 5'
    SYNTHETIC_VOICE_6 = 154, 'Synthetic Voice 6'
    SYNTHETIC_VOICE_7 = 155, 'Synthetic Voice 7'
    SYNTHETIC_VOICE_8 = 156, 'Synthetic Voice 8'
    SYNTHETIC_VOICE_9 = 157, 'Synthetic Voice 9'
    SYNTHETIC_VOICE_10 = 158, 'Synthetic Voice 10'
    SYNTHETIC_VOICE_11 = 159, 'Synthetic Voice 11'
    SYNTHETIC_VOICE_12 = 160, 'Synthetic Voice 12'
    SYNTHETIC_VOICE_13 = 161, 'Synthetic Voice 13'
    SYNTHETIC_VOICE_14 = 162, 'Synthetic Voice 14'
    SYNTHETIC_VOICE_15 = 163, 'Synthetic Voice 15'
    SYNTHETIC_VOICE_16 = 164, 'Synthetic Voice 16'
    SYNTHETIC_VOICE_17 = 165, 'Synthetic Voice 17'
    SYNTHETIC_VOICE_18 = 166, 'Synthetic Voice 18'
    SYNTHETIC_VOICE_19 = 167, 'Synthetic Voice 19'
    SYNTHETIC_VOICE_20 = 168, 'Synthetic Voice 20'
    SYNTHETIC_VOICE_21 = 169, 'Synthetic Voice 21'
    SYNTHETIC_VOICE_22 = 170, 'Synthetic Voice 22'
    SYNTHETIC_VOICE_23 = 171, 'Synthetic Voice 23'
    SYNTHETIC_VOICE_24 = 172, 'Synthetic Voice 24'
    SYNTHETIC_VOICE_25 = 173, 'Synthetic Voice 25'
    SYNTHETIC_VOICE_26 = 174, 'Synthetic Voice 26'
    SYNTHETIC_VOICE_27 = 175, 'Synthetic Voice 27'
    SYNTHETIC_VOICE_28 = 176, 'Synthetic Voice 28'
    SYNTHETIC_VOICE_29 = 177, 'Synthetic Voice 29'

    # Organ, keys and instruments
    ORGAN_1 = 178, 'Organ 1'
    ORGAN_2 = 179, 'Organ 2'
    ORGAN_3 = 180, 'Organ 3'
    ORGAN_4 = 181, 'Organ 4'
    ORGAN_5 = 182, 'Organ 5'
    ORGAN_6 = 183, 'Organ 6'
    ORGAN_7 = 184, 'Organ 7'
    ORGAN_8 = 185, 'Organ 8'
    ORGAN_9 = 186, 'Organ 9'
    ORGAN_10 = 187, 'Organ 10'
    ORGAN_11 = 188, 'Organ 11'
    ORGAN_12 = 189, 'Organ 12'
    ORGAN_13 = 190, 'Organ 13'
    ORGAN_14 = 191, 'Organ 14'
    ORGAN_15 = 192, 'Organ 15'
    ORGAN_16 = 193, 'Organ 16'
    ORGAN_17 = 194, 'Organ 17'
    ORGAN_18 = 195, 'Organ 18'
    ORGAN_19 = 196, 'Organ 19'
    ORGAN_20 = 197, 'Organ 20'
    ORGAN_21 = 198, 'Organ 21'
    ORGAN_22 = 199, 'Organ 22'
    ORGAN_23 = 200, 'Organ 23'
    E_PIANO_1 = 201, 'E Piano 1'
    E_PIANO_2 = 202, 'E Piano 2'
    E_PIANO_3 = 203, 'E Piano 3'
    E_PIANO_4 = 204, 'E Piano 4'
    KEY_1 = 205, 'Key 1'
    KEY_2 = 206, 'Key 2'
    KEY_3 = 207, 'Key 3'
    DIST_GUITAR_1 = 208, 'Dist Guitar 1'
    DIST_GUITAR_2 = 209, 'Dist Guitar 2'
    RHODE = 210, 'Rhode'
    BRASS_1 = 211, 'Brass 1'
    BRASS_2 = 212, 'Brass 2'
    CHIP_1 = 213, 'Chip 1'
    CHIP_2 = 214, 'Chip 2'
    CHIP_3 = 215, 'Chip 3'
    CHIP_4 = 216, 'Chip 4'
    CHIP_5 = 217, 'Chip 5'
    CHIP_6 = 218, 'Chip 6'
    CHIP_7 = 219, 'Chip 7'

    # Gritty and dirty
    GRITTY_1 = 220, 'Gritty 1'
    GRITTY_2 = 221, 'Gritty 2'
    GRITTY_3 = 222, 'Gritty 3'
    GRITTY_4 = 223, 'Gritty 4'
    GRITTY_5 = 224, 'Gritty 5'
    GRITTY_6 = 225, 'Gritty 6'
    DIRTY_1_A = 226, 'Dirty 1 A'
    DIRTY_1_B = 227, 'Dirty 1 B'
    DIRTY_1_C = 228, 'Dirty 1 C'
    DIRTY_2_A = 229, 'Dirty 2 A'
    DIRTY_2_B = 230, 'Dirty 2 B'
    DIRTY_2_C = 231, 'Dirty 2 C'
    DIRTY_3_A = 232, 'Dirty 3 A'
    DIRTY_3_B = 233, 'Dirty 3 B'
    DIRTY_3_C = 234, 'Dirty 3 C'
    DIRTY_4_A = 235, 'Dirty 4 A'
    DIRTY_4_B = 236, 'Dirty 4 B'
    DIRTY_4_C = 237, 'Dirty 4 C'
    DIRTY_5_A = 238, 'Dirty 5 A'
    DIRTY_5_B = 239, 'Dirty 5 B'
    DIRTY_5_C = 240, 'Dirty 5 C'
    DIRTY_6_A = 241, 'Dirty 6 A'
    DIRTY_6_B = 242, 'Dirty 6 B'
    DIRTY_6_C = 243, 'Dirty 6 C'
    DIRTY_7_A = 244, 'Dirty 7 A'
    DIRTY_7_B = 245, 'Dirty 7 B'
    DIRTY_7_C = 246, 'Dirty 7 C'
    DIRTY_8_A = 247, 'Dirty 8 A'
    DIRTY_8_B = 248, 'Dirty 8 B'
    DIRTY_8_C = 249, 'Dirty 8 C'

    # Gates and ducking
    GATE_1 = 250, 'Gate 1'
    GATE_2 = 251, 'Gate 2'
    GATE_3 = 252, 'Gate 3'
    GATE_4 = 253, 'Gate 4'
    DUCK_1 = 254, 'Duck 1'
    DUCK_2 = 255, 'Duck 2'
    DUCK_3 = 256, 'Duck 3'
