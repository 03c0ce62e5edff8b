from .polynomial import Bounds, ColdJunctionCoeffs, InverseCoeffs, Segment, TypeProfile

# Coefficient tables for the rational polynomial fits of each thermocouple type.
# Voltages in mV, temperatures in degrees Celcius.
# Source:
# http://www.mosaic-industries.com/embedded-systems/microcontroller-projects/temperature-measurement/thermocouple/calibration-table

TYPE_B = TypeProfile(
    name="B",
    cold_junction=ColdJunctionCoeffs(
        T0=4.2000000e01,
        V0=3.3933898e-04,
        p1=2.1196684e-04,
        p2=3.3801250e-06,
        p3=-1.4793289e-07,
        p4=-3.3571424e-09,
        q1=-1.0920410e-02,
        q2=-4.9782932e-04,
    ),
    segments=(
        Segment(
            0.291,
            2.431,
            InverseCoeffs(
                T0=5.0000000e02,
                V0=1.2417900e00,
                p1=1.9858097e02,
                p2=2.4284248e01,
                p3=-9.7271640e01,
                p4=-1.5701178e01,
                q1=3.1009445e-01,
                q2=-5.0880251e-01,
                q3=-1.6163342e-01,
            ),
        ),
        Segment(
            2.431,
            13.820,
            InverseCoeffs(
                T0=1.2461474e03,
                V0=7.2701221e00,
                p1=9.4321033e01,
                p2=7.3899296e00,
                p3=-1.5880987e-01,
                p4=1.2681877e-02,
                q1=1.0113834e-01,
                q2=-1.6145962e-03,
                q3=-4.1086314e-06,
            ),
        ),
    ),
)

TYPE_E = TypeProfile(
    name="E",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=1.4950582e00,
        p1=6.0958443e-02,
        p2=-2.7351789e-04,
        p3=-1.9130146e-05,
        p4=-1.3948840e-08,
        q1=-5.2382378e-03,
        q2=-3.0970168e-04,
    ),
    segments=(
        Segment(
            -9.835,
            -5.237,
            InverseCoeffs(
                T0=-1.1721668e02,
                V0=-5.9901698e00,
                p1=2.3647275e01,
                p2=1.2807377e01,
                p3=2.0665069e00,
                p4=8.6513472e-02,
                q1=5.8995860e-01,
                q2=1.0960713e-01,
                q3=6.1769588e-03,
            ),
        ),
        Segment(
            -5.237,
            0.591,
            InverseCoeffs(
                T0=-5.0000000e01,
                V0=-2.7871777e00,
                p1=1.9022736e01,
                p2=-1.7042725e00,
                p3=-3.5195189e-01,
                p4=4.7766102e-03,
                q1=-6.5379760e-02,
                q2=-2.1732833e-02,
                q3=0.0,
            ),
        ),
        Segment(
            0.591,
            24.964,
            InverseCoeffs(
                T0=2.5014600e02,
                V0=1.7191713e01,
                p1=1.3115522e01,
                p2=1.1780364e00,
                p3=3.6422433e-02,
                p4=3.9584261e-04,
                q1=9.3112756e-02,
                q2=2.9804232e-03,
                q3=3.3263032e-05,
            ),
        ),
        Segment(
            24.964,
            53.112,
            InverseCoeffs(
                T0=6.0139890e02,
                V0=4.5206167e01,
                p1=1.2399357e01,
                p2=4.3399963e-01,
                p3=9.1967085e-03,
                p4=1.6901585e-04,
                q1=3.4424680e-02,
                q2=6.9741215e-04,
                q3=1.2946992e-05,
            ),
        ),
        Segment(
            53.112,
            76.373,
            InverseCoeffs(
                T0=8.0435911e02,
                V0=6.1359178e01,
                p1=1.2759508e01,
                p2=-1.1116072e00,
                p3=3.5332536e-02,
                p4=3.3080380e-05,
                q1=-8.8196889e-02,
                q2=2.8497415e-03,
                q3=0.0,
            ),
        ),
    ),
)

TYPE_J = TypeProfile(
    name="J",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=1.2773432e00,
        p1=5.1744084e-02,
        p2=-5.4138663e-05,
        p3=-2.2895769e-06,
        p4=-7.7947143e-10,
        q1=-1.5173342e-03,
        q2=-4.2314514e-05,
    ),
    segments=(
        Segment(
            -8.095,
            0.0,
            InverseCoeffs(
                T0=-6.4936529e01,
                V0=-3.1169773e00,
                p1=2.2133797e01,
                p2=2.0476437e00,
                p3=-4.6867532e-01,
                p4=-3.6673992e-02,
                q1=1.1746348e-01,
                q2=-2.0903413e-02,
                q3=-2.1823704e-03,
            ),
        ),
        Segment(
            0.0,
            21.840,
            InverseCoeffs(
                T0=2.5066947e02,
                V0=1.3592329e01,
                p1=1.8014787e01,
                p2=-6.5218881e-02,
                p3=-1.2179108e-02,
                p4=2.0061707e-04,
                q1=-3.9494552e-03,
                q2=-7.3728206e-04,
                q3=1.6679731e-05,
            ),
        ),
        Segment(
            21.840,
            45.494,
            InverseCoeffs(
                T0=6.4950262e02,
                V0=3.6040848e01,
                p1=1.6593395e01,
                p2=7.3009590e-01,
                p3=2.4157343e-02,
                p4=1.2787077e-03,
                q1=4.9172861e-02,
                q2=1.6813810e-03,
                q3=7.6067922e-05,
            ),
        ),
        Segment(
            45.494,
            57.953,
            InverseCoeffs(
                T0=9.2510550e02,
                V0=5.3433832e01,
                p1=1.6243326e01,
                p2=9.2793267e-01,
                p3=6.4644193e-03,
                p4=2.0464414e-03,
                q1=5.2541788e-02,
                q2=1.3682959e-04,
                q3=1.3454746e-04,
            ),
        ),
        Segment(
            57.953,
            69.553,
            InverseCoeffs(
                T0=1.0511294e03,
                V0=6.0956091e01,
                p1=1.7156001e01,
                p2=-2.5931041e00,
                p3=-5.8339803e-02,
                p4=1.9954137e-02,
                q1=-1.5305581e-01,
                q2=-2.9523967e-03,
                q3=1.1340164e-03,
            ),
        ),
    ),
)

# Type K is the only table published with segments open at the low end and
# closed at the high end
TYPE_K = TypeProfile(
    name="K",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=1.0003453e00,
        p1=4.0514854e-02,
        p2=-3.8789638e-05,
        p3=-2.8608478e-06,
        p4=-9.5367041e-10,
        q1=-1.3948675e-03,
        q2=-6.7976627e-05,
    ),
    segments=(
        Segment(
            -6.404,
            -3.554,
            InverseCoeffs(
                T0=-1.2147164e02,
                V0=-4.1790858e00,
                p1=3.6069513e01,
                p2=3.0722076e01,
                p3=7.7913860e00,
                p4=5.2593991e-01,
                q1=9.3939547e-01,
                q2=2.7791285e-01,
                q3=2.5163349e-02,
            ),
            Bounds.OPEN_CLOSED,
        ),
        Segment(
            -3.554,
            4.096,
            InverseCoeffs(
                T0=-8.7935962e00,
                V0=-3.4489914e-01,
                p1=2.5678719e01,
                p2=-4.9887904e-01,
                p3=-4.4705222e-01,
                p4=-4.4869203e-02,
                q1=2.3893439e-04,
                q2=-2.0397750e-02,
                q3=-1.8424107e-03,
            ),
            Bounds.OPEN_CLOSED,
        ),
        Segment(
            4.096,
            16.397,
            InverseCoeffs(
                T0=3.1018976e02,
                V0=1.2631386e01,
                p1=2.4061949e01,
                p2=4.0158622e00,
                p3=2.6853917e-01,
                p4=-9.7188544e-03,
                q1=1.6995872e-01,
                q2=1.1413069e-02,
                q3=-3.9275155e-04,
            ),
            Bounds.OPEN_CLOSED,
        ),
        Segment(
            16.397,
            33.275,
            InverseCoeffs(
                T0=6.0572562e02,
                V0=2.5148718e01,
                p1=2.3539401e01,
                p2=4.6547228e-02,
                p3=1.3444400e-02,
                p4=5.9236853e-04,
                q1=8.3445513e-04,
                q2=4.6121445e-04,
                q3=2.5488122e-05,
            ),
            Bounds.OPEN_CLOSED,
        ),
        Segment(
            33.275,
            69.553,
            InverseCoeffs(
                T0=1.0184705e03,
                V0=4.1993851e01,
                p1=2.5783239e01,
                p2=-1.8363403e00,
                p3=5.6176662e-02,
                p4=1.8532400e-04,
                q1=-7.4803355e-02,
                q2=2.3841860e-03,
                q3=0.0,
            ),
            Bounds.OPEN_CLOSED,
        ),
    ),
)

TYPE_N = TypeProfile(
    name="N",
    cold_junction=ColdJunctionCoeffs(
        T0=7.0000000e00,
        V0=1.8210024e-01,
        p1=2.6228256e-02,
        p2=-1.5485539e-04,
        p3=2.1366031e-06,
        p4=9.2047105e-10,
        q1=-6.4070932e-03,
        q2=8.2161781e-05,
    ),
    segments=(
        Segment(
            -4.313,
            0.0,
            InverseCoeffs(
                T0=-5.9610511e01,
                V0=-1.5000000e00,
                p1=4.2021322e01,
                p2=4.7244037e00,
                p3=-6.1153213e00,
                p4=-9.9980337e-01,
                q1=1.6385664e-01,
                q2=-1.4994026e-01,
                q3=-3.0810372e-02,
            ),
        ),
        Segment(
            0.0,
            20.613,
            InverseCoeffs(
                T0=3.1534505e02,
                V0=9.8870997e00,
                p1=2.7988676e01,
                p2=1.5417343e00,
                p3=-1.4689457e-01,
                p4=-6.8322712e-03,
                q1=6.2600036e-02,
                q2=-5.1489572e-03,
                q3=-2.8835863e-04,
            ),
        ),
        Segment(
            20.613,
            47.513,
            InverseCoeffs(
                T0=1.0340172e03,
                V0=3.7565475e01,
                p1=2.6029492e01,
                p2=-6.0783095e-01,
                p3=-9.7742562e-03,
                p4=-3.3148813e-06,
                q1=-2.5351881e-02,
                q2=-3.8746827e-04,
                q3=1.7088177e-06,
            ),
        ),
    ),
)

TYPE_R = TypeProfile(
    name="R",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=1.4067016e-01,
        p1=5.9330356e-03,
        p2=2.7736904e-05,
        p3=-1.0819644e-06,
        p4=-2.3098349e-09,
        q1=2.6146871e-03,
        q2=-1.8621487e-04,
    ),
    segments=(
        Segment(
            -0.226,
            1.469,
            InverseCoeffs(
                T0=1.3054315e02,
                V0=8.8333090e-01,
                p1=1.2557377e02,
                p2=1.3900275e02,
                p3=3.3035469e01,
                p4=-8.5195924e-01,
                q1=1.2232896e00,
                q2=3.5603023e-01,
                q3=0.0,
            ),
        ),
        Segment(
            1.469,
            7.461,
            InverseCoeffs(
                T0=5.4188181e02,
                V0=4.9312886e00,
                p1=9.0208190e01,
                p2=6.1762254e00,
                p3=-1.2279323e00,
                p4=1.4873153e-02,
                q1=8.7670455e-02,
                q2=-1.2906694e-02,
                q3=0.0,
            ),
        ),
        Segment(
            7.461,
            14.277,
            InverseCoeffs(
                T0=1.0382132e03,
                V0=1.1014763e01,
                p1=7.4669343e01,
                p2=3.4090711e00,
                p3=-1.4511205e-01,
                p4=6.3077387e-03,
                q1=5.6880253e-02,
                q2=-2.0512736e-03,
                q3=0.0,
            ),
        ),
        Segment(
            14.277,
            21.101,
            InverseCoeffs(
                T0=1.5676133e03,
                V0=1.8397910e01,
                p1=7.1646299e01,
                p2=-1.0866763e00,
                p3=-2.0968371e00,
                p4=-7.6741168e-01,
                q1=-1.9712341e-02,
                q2=-2.9903595e-02,
                q3=-1.0766878e-02,
            ),
        ),
    ),
)

TYPE_S = TypeProfile(
    name="S",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=1.4269163e-01,
        p1=5.9829057e-03,
        p2=4.5292259e-06,
        p3=-1.3380281e-06,
        p4=-2.3742577e-09,
        q1=-1.0650446e-03,
        q2=-2.2042420e-04,
    ),
    segments=(
        Segment(
            -0.236,
            1.441,
            InverseCoeffs(
                T0=1.3792630e02,
                V0=9.3395024e-01,
                p1=1.2761836e02,
                p2=1.1089050e02,
                p3=1.9898457e01,
                p4=9.6152996e-02,
                q1=9.6545918e-01,
                q2=2.0813850e-01,
                q3=0.0,
            ),
        ),
        Segment(
            1.441,
            6.913,
            InverseCoeffs(
                T0=4.7673468e02,
                V0=4.0037367e00,
                p1=1.0174512e02,
                p2=-8.9306371e00,
                p3=-4.2942435e00,
                p4=2.0453847e-01,
                q1=-7.1227776e-02,
                q2=-4.4618306e-02,
                q3=1.6822887e-03,
            ),
        ),
        Segment(
            6.913,
            12.856,
            InverseCoeffs(
                T0=9.7946589e02,
                V0=9.3508283e00,
                p1=8.7126730e01,
                p2=-2.3139202e00,
                p3=-3.2682118e-02,
                p4=4.6090022e-03,
                q1=-1.4299790e-02,
                q2=-1.2289882e-03,
                q3=0.0,
            ),
        ),
        Segment(
            12.856,
            18.693,
            InverseCoeffs(
                T0=1.6010461e03,
                V0=1.6789315e01,
                p1=8.4315871e01,
                p2=-1.0185043e01,
                p3=-4.6283954e00,
                p4=-1.0158749e00,
                q1=-1.2877783e-01,
                q2=-5.5802216e-02,
                q3=-1.2146518e-02,
            ),
        ),
    ),
)

TYPE_T = TypeProfile(
    name="T",
    cold_junction=ColdJunctionCoeffs(
        T0=2.5000000e01,
        V0=9.9198279e-01,
        p1=4.0716564e-02,
        p2=7.1170297e-04,
        p3=6.8782631e-07,
        p4=4.3295061e-11,
        q1=1.6458102e-02,
        q2=0.0,
    ),
    segments=(
        Segment(
            -6.18,
            -4.648,
            InverseCoeffs(
                T0=-1.9243000e02,
                V0=-5.4798963e00,
                p1=5.9572141e01,
                p2=1.9675733e00,
                p3=-7.8176011e01,
                p4=-1.0963280e01,
                q1=2.7498092e-01,
                q2=-1.3768944e00,
                q3=-4.5209805e-01,
            ),
        ),
        Segment(
            -4.648,
            0.0,
            InverseCoeffs(
                T0=-6.0000000e01,
                V0=-2.1528350e00,
                p1=3.0449332e01,
                p2=-1.2946560e00,
                p3=-3.0500735e00,
                p4=-1.9226856e-01,
                q1=6.9877863e-03,
                q2=-1.0596207e-01,
                q3=-1.0774995e-02,
            ),
        ),
        Segment(
            0.0,
            9.288,
            InverseCoeffs(
                T0=1.3500000e02,
                V0=5.9588600e00,
                p1=2.0325591e01,
                p2=3.3013079e00,
                p3=1.2638462e-01,
                p4=-8.2883695e-04,
                q1=1.7595577e-01,
                q2=7.9740521e-03,
                q3=0.0,
            ),
        ),
        Segment(
            9.288,
            20.872,
            InverseCoeffs(
                T0=3.0000000e02,
                V0=1.4861780e01,
                p1=1.7214707e01,
                p2=-9.3862713e-01,
                p3=-7.3509066e-02,
                p4=2.9576140e-04,
                q1=-4.8095795e-02,
                q2=-4.7352054e-03,
                q3=0.0,
            ),
        ),
    ),
)

ALL_TYPES = (TYPE_B, TYPE_E, TYPE_J, TYPE_K, TYPE_N, TYPE_R, TYPE_S, TYPE_T)
