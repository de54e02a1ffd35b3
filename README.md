# pcmtools

Small command-line tools for raw audio in signed 16-bit little-endian mono
samples at 44100 Hz. They read and write plain byte streams, so they combine
with pipes and with tools such as SoX's `rec` and `play`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Audio tools

| Command | What it does |
|---------|--------------|
| `pcm-synth sine VOLUME FREQUENCY COUNT` | Writes COUNT samples of a sine wave to standard output |
| `pcm-synth doremi VOLUME TIMES` | Writes a rising major scale of TIMES notes (0.3 s each, starting at 261.63 Hz) |
| `pcm-bandpass N LOW HIGH` | FFT band-pass filter from standard input to standard output in blocks of N samples; the spectrum of each block is written to `fft.dat` in the current directory |
| `pcm-downsample RATE` | Keeps every RATE-th sample of standard input |
| `pcm-datafiles hitoshi FILE` | Writes six fixed UTF-8 bytes to FILE |
| `pcm-datafiles ramp FILE` | Writes the bytes 0 to 255 to FILE |
| `pcm-datafiles bytes INPUT OUTPUT` | Lists each byte of INPUT as an `index value` line in OUTPUT |
| `pcm-datafiles shorts INPUT OUTPUT` | Lists each 16-bit sample of INPUT as an `index value` line in OUTPUT |

Example: filter a recording to 300–3400 Hz in blocks of 8192 samples:

```
pcm-bandpass 8192 300 3400 < voice.raw > voice_filtered.raw
```

N must be a power of two; otherwise the command reports an error and exits
with status 1.

## Network tools

| Command | What it does |
|---------|--------------|
| `pcm-client recv IP PORT` | Connects over TCP and prints everything the server sends |
| `pcm-client send IP PORT` | Sends standard input over TCP, half-closes, then prints the reply |
| `pcm-client udp IP PORT` | Sends standard input as UDP datagrams, then prints replies until an empty one |
| `pcm-phone send PORT` | Waits for one TCP client and sends it standard input |
| `pcm-phone send-rec PORT` | Waits for one TCP client and sends it audio from the microphone |
| `pcm-phone phone PORT` | Two-way voice link, waiting for a caller |
| `pcm-phone phone SERVER_IP PORT` | Two-way voice link, calling a waiting peer |

The microphone is read with `rec -t raw -b 16 -c 1 -e s -r 44100 -`, so SoX
must be installed for `send-rec` and `phone`. Received audio is written to
standard output; pipe it to a player:

```
pcm-phone phone 50000 | play -t raw -b 16 -c 1 -e s -r 44100 -
```

## Small utilities

* `pcm-calc` reads one line such as `1+(-2+3)*4-5/6+8/9/10` from standard input
  and prints its value. Numbers are real numbers, spaces are not allowed, and a
  syntax error is reported with a caret under the offending position.
* `pcm-angle Ax Ay Az Bx By Bz` prints the angle in radians between two vectors.
* `pcm-basics cat PATH` copies a file to standard output,
  `pcm-basics reverse FILE` prints a file with its bytes reversed,
  `pcm-basics product X Y` prints X * Y (or `0.000000` if either is not a
  number), and `pcm-basics trig` prints cos²(t)+sin²(t) for t = 0 … 99.

## Using the library

```python
from pcmtools.calc import evaluate, ExpressionSyntaxError
from pcmtools.vector import Vect3
from pcmtools.synth import sine_samples, doremi_samples, to_pcm
from pcmtools.fft import fft, ifft, bandpass, filter_stream
from pcmtools.downsample import downsample

evaluate("(1+2)*3")                         # 9.0
Vect3(1, 0, 0).angle(Vect3(0, 1, 0))        # 1.5707963...
pcm = to_pcm(sine_samples(10000, 440, 44100, 44100))
half = downsample(pcm, 2)
```

`fft` scales its result by 1/n and `ifft` does not scale, so
`ifft(fft(x))` gives back `x`. Both require a power-of-two length and raise
`ValueError` otherwise.

## Limitations

There is no built-in playback or recording: audio comes from and goes to byte
streams, and the microphone is reached only through the external `rec`
command. The network tools handle a single connection and then exit.